from datetime import datetime
from typing import Optional

from rfp_assistant.models.chat_message import utcnow
from rfp_assistant.schemas.rfp import ParsedRequest
from rfp_assistant.services.extractors import (
    attach_specifications,
    derive_title,
    extract_budget,
    extract_delivery_deadline,
    extract_items,
    extract_payment_terms,
    extract_warranty,
)


def compile_request(text: str, now: Optional[datetime] = None) -> ParsedRequest:
    """Construye el borrador completo; cada extractor lee el mismo texto original."""
    now = now or utcnow()
    items = attach_specifications(extract_items(text), text)
    return ParsedRequest(
        title=derive_title(items),
        description=text,
        items=items,
        budget=extract_budget(text),
        delivery_deadline=extract_delivery_deadline(text, now),
        payment_terms=extract_payment_terms(text),
        warranty_requirement=extract_warranty(text),
    )
