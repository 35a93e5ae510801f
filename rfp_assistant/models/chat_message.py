from datetime import datetime, timezone
from pydantic import BaseModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ChatMessage(BaseModel):
    id: int
    role: str  # "user" | "assistant"
    content: str
    timestamp: datetime = Field(default_factory=utcnow)

    class Config:
        frozen = True
