from datetime import datetime
from typing import List

from rfp_assistant.schemas.rfp import ParsedRequest, RFPItem
from rfp_assistant.utils.message_loader import load_message


def format_items(items: List[RFPItem]) -> str:
    return ", ".join(f"{i.quantity}x {i.name}" for i in items)


def format_budget(budget: int) -> str:
    return f"${budget:,}"


def format_date(value: datetime) -> str:
    # M/D/YYYY, sin ceros a la izquierda
    return f"{value.month}/{value.day}/{value.year}"


def format_draft_summary(draft: ParsedRequest) -> str:
    return load_message(
        "draft_summary.txt",
        title=draft.title,
        items=format_items(draft.items),
        budget=format_budget(draft.budget),
        delivery=format_date(draft.delivery_deadline),
        payment_terms=draft.payment_terms,
        warranty=draft.warranty_requirement,
    )
