from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from rfp_assistant.models.conversation import ConversationSession
from rfp_assistant.schemas.chat_message import ChatMessageCreate, ChatMessageRead, ConversationRead
from rfp_assistant.services.chat_flow import ConversationOrchestrator, get_orchestrator
from rfp_assistant.services.session_store import SessionStore, SessionNotFound, get_store
from rfp_assistant.utils.message_loader import load_lines

router = APIRouter()


def get_conversation(session_id: str, store: SessionStore = Depends(get_store)) -> ConversationSession:
    try:
        return store.get(session_id)
    except SessionNotFound:
        raise HTTPException(status_code=404, detail="Conversation not found")


def to_read(session: ConversationSession) -> ConversationRead:
    last = session.last_message()
    return ConversationRead(
        id=session.id,
        state=session.state,
        created_at=session.created_at,
        message_count=len(session.messages),
        has_draft=session.current_draft is not None,
        last_message=ChatMessageRead.model_validate(last) if last else None,
    )


@router.post("/", response_model=ConversationRead, status_code=status.HTTP_201_CREATED)
def create_conversation(store: SessionStore = Depends(get_store)):
    return to_read(store.create())


@router.get("/", response_model=List[ConversationRead])
def list_conversations(store: SessionStore = Depends(get_store)):
    return [to_read(store.get(sid)) for sid in store.list_ids()]


@router.get("/examples", response_model=List[str])
def list_example_prompts():
    return load_lines("examples.txt")


@router.get("/{session_id}", response_model=ConversationRead)
def read_conversation(session: ConversationSession = Depends(get_conversation)):
    return to_read(session)


@router.get("/{session_id}/messages", response_model=List[ChatMessageRead])
def get_conversation_messages(session: ConversationSession = Depends(get_conversation)):
    return session.messages


@router.post("/{session_id}/messages", response_model=ChatMessageRead)
async def send_message(
    message_in: ChatMessageCreate,
    session: ConversationSession = Depends(get_conversation),
    orchestrator: ConversationOrchestrator = Depends(get_orchestrator),
):
    # El orquestador ignora en silencio; aquí se informa el motivo
    if not message_in.content.strip():
        raise HTTPException(status_code=400, detail="Message is empty")
    if session.is_processing:
        raise HTTPException(status_code=409, detail="Conversation is processing a previous message")

    reply = await orchestrator.submit(session, message_in.content)
    if reply is None:
        raise HTTPException(status_code=409, detail="Conversation is processing a previous message")
    return reply


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_conversation(session_id: str, store: SessionStore = Depends(get_store)):
    try:
        store.delete(session_id)
    except SessionNotFound:
        raise HTTPException(status_code=404, detail="Conversation not found")
