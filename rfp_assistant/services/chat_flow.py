import asyncio
import logging
from datetime import datetime
from typing import Callable, Optional

from rfp_assistant.core.config import Settings
from rfp_assistant.models.chat_message import ChatMessage, utcnow
from rfp_assistant.models.conversation import ConversationSession, IDLE, PROCESSING
from rfp_assistant.schemas.rfp import ParsedRequest
from rfp_assistant.services.context_builder import format_draft_summary
from rfp_assistant.services.request_compiler import compile_request
from rfp_assistant.utils.message_loader import load_message

logger = logging.getLogger(__name__)


def start_conversation(session: ConversationSession) -> ChatMessage:
    return session.append("assistant", load_message("greeting.txt"))


class ConversationOrchestrator:
    """
    Turnos de una conversación: Idle -> Processing -> Idle.

    - Texto vacío o sesión ocupada: se ignora (sin mensaje, sin cambio de estado).
    - El mensaje del usuario se añade antes de la pausa.
    - ``processing_delay`` es una pausa de ritmo para la UI, no coste de cálculo.
    """

    def __init__(
        self,
        processing_delay: float = 1.5,
        compiler: Callable[..., ParsedRequest] = compile_request,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.processing_delay = processing_delay
        self.compiler = compiler
        self.clock = clock

    def can_submit(self, session: ConversationSession, text: str) -> bool:
        return bool(text and text.strip()) and not session.is_processing

    async def submit(self, session: ConversationSession, text: str) -> Optional[ChatMessage]:
        if not self.can_submit(session, text):
            logger.debug("Ignoring submission for session %s (state=%s)", session.id, session.state)
            return None

        session.append("user", text)
        session.state = PROCESSING
        try:
            await asyncio.sleep(self.processing_delay)
            draft = self.compiler(text, now=self.clock())
            session.replace_draft(draft)
            reply = session.append("assistant", format_draft_summary(draft))
        finally:
            session.state = IDLE

        logger.info("Session %s: draft '%s' with %d item(s)", session.id, draft.title, len(draft.items))
        return reply


def get_orchestrator() -> ConversationOrchestrator:
    return ConversationOrchestrator(processing_delay=Settings().processing_delay_seconds)
