import logging

from fastapi import APIRouter, Depends, HTTPException

from rfp_assistant.api.endpoints.conversations import get_conversation
from rfp_assistant.models.conversation import ConversationSession
from rfp_assistant.schemas.rfp import DraftPreviewRead, InterpretRequest, ParsedRequest, RFPConfirmRead
from rfp_assistant.services.request_compiler import compile_request
from rfp_assistant.services.session_store import SessionStore, get_store
from rfp_assistant.utils.message_loader import load_message
from rfp_assistant.utils.rfp_client import RFPServiceClient, RFPServiceError, get_rfp_client

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/conversations/{session_id}/draft", response_model=DraftPreviewRead)
def get_draft(session: ConversationSession = Depends(get_conversation)):
    if session.current_draft is None:
        return DraftPreviewRead(has_draft=False, hint=load_message("draft_placeholder.txt"))
    return DraftPreviewRead(has_draft=True, draft=session.current_draft)


@router.post("/conversations/{session_id}/draft/confirm", response_model=RFPConfirmRead)
def confirm_draft(
    session: ConversationSession = Depends(get_conversation),
    client: RFPServiceClient = Depends(get_rfp_client),
    store: SessionStore = Depends(get_store),
):
    """
    Envía el borrador actual al servicio de RFP sin modificarlo y cierra la conversación.
    Sin reintentos: los errores del servicio se devuelven como 502 y la sesión se conserva.
    """
    draft = session.current_draft
    if draft is None:
        raise HTTPException(status_code=400, detail="No draft to confirm")
    if session.is_processing:
        raise HTTPException(status_code=409, detail="Conversation is processing a previous message")

    try:
        result = client.create_rfp(draft)
    except RFPServiceError as exc:
        raise HTTPException(status_code=502, detail=str(exc))

    logger.info("Draft '%s' from conversation %s sent to RFP service", draft.title, session.id)
    store.delete(session.id)
    return RFPConfirmRead(message=result["message"], rfp=result["data"])


@router.post("/interpret", response_model=ParsedRequest)
def interpret(request: InterpretRequest):
    if not request.text.strip():
        raise HTTPException(status_code=400, detail="Text is empty")
    return compile_request(request.text)
