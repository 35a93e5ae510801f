import logging
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from rfp_assistant.core.config import Settings
from rfp_assistant.models.chat_message import utcnow
from rfp_assistant.models.conversation import ConversationSession
from rfp_assistant.services.chat_flow import start_conversation

logger = logging.getLogger(__name__)


class SessionNotFound(KeyError):
    pass


class SessionStore:
    """
    Sesiones vivas en memoria; no sobreviven al proceso.
    Las abandonadas caducan tras ``ttl_minutes`` desde su creación.
    """

    def __init__(self, ttl_minutes: Optional[int] = None):
        self.ttl = timedelta(minutes=ttl_minutes) if ttl_minutes else None
        self._sessions: Dict[str, ConversationSession] = {}

    def create(self) -> ConversationSession:
        self.evict_expired()
        session = ConversationSession()
        start_conversation(session)
        self._sessions[session.id] = session
        logger.info("Conversation %s started", session.id)
        return session

    def get(self, session_id: str) -> ConversationSession:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFound(session_id) from None

    def delete(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFound(session_id)
        logger.info("Conversation %s closed", session_id)

    def evict_expired(self, now: Optional[datetime] = None) -> int:
        if self.ttl is None:
            return 0
        limit = (now or utcnow()) - self.ttl
        # Una sesión en curso no se elimina
        expired = [
            sid for sid, s in self._sessions.items()
            if s.created_at < limit and not s.is_processing
        ]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.info("Evicted %d expired conversation(s)", len(expired))
        return len(expired)

    def list_ids(self) -> List[str]:
        return list(self._sessions)

    def __len__(self) -> int:
        return len(self._sessions)


_store = SessionStore(ttl_minutes=Settings().session_ttl_minutes)


def get_store() -> SessionStore:
    return _store
