from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class ChatMessageCreate(BaseModel):
    content: str

class ChatMessageRead(BaseModel):
    id: int
    role: str
    content: str
    timestamp: datetime

    class Config:
        from_attributes = True

class ConversationRead(BaseModel):
    id: str
    state: str  # "idle" | "processing"
    created_at: datetime
    message_count: int
    has_draft: bool
    last_message: Optional[ChatMessageRead] = None
