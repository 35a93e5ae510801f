import uuid
from datetime import datetime
from typing import List, Optional

from rfp_assistant.models.chat_message import ChatMessage, utcnow
from rfp_assistant.schemas.rfp import ParsedRequest

IDLE = "idle"
PROCESSING = "processing"


class ConversationSession:
    """Chat history of one RFP creation flow plus its latest draft.

    The message log is append-only; ``current_draft`` is replaced as a whole
    on every completed turn.
    """

    def __init__(self, session_id: Optional[str] = None):
        self.id = session_id or uuid.uuid4().hex
        self.created_at: datetime = utcnow()
        self.state: str = IDLE
        self.current_draft: Optional[ParsedRequest] = None
        self._messages: List[ChatMessage] = []
        self._next_id = 1

    @property
    def messages(self) -> List[ChatMessage]:
        return list(self._messages)

    @property
    def is_processing(self) -> bool:
        return self.state == PROCESSING

    def append(self, role: str, content: str) -> ChatMessage:
        if role not in ("user", "assistant"):
            raise ValueError(f"Unknown role: {role}")
        msg = ChatMessage(id=self._next_id, role=role, content=content, timestamp=utcnow())
        self._next_id += 1
        self._messages.append(msg)
        return msg

    def replace_draft(self, draft: ParsedRequest) -> None:
        self.current_draft = draft

    def last_message(self) -> Optional[ChatMessage]:
        return self._messages[-1] if self._messages else None
