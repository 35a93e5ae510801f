import sys
from pathlib import Path
from datetime import datetime, timedelta, timezone

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from rfp_assistant.services.request_compiler import compile_request
from rfp_assistant.services.context_builder import format_draft_summary

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def test_compile_office_furniture_request():
    text = "20 ergonomic chairs and 10 standing desks. Budget around $15,000."
    draft = compile_request(text, now=NOW)
    assert draft.title == "Ergonomic chairs & Standing desks Procurement"
    assert draft.description == text
    assert [(i.name, i.quantity) for i in draft.items] == [("Ergonomic chairs", 20), ("Standing desks", 10)]
    assert draft.budget == 20
    assert draft.delivery_deadline == NOW + timedelta(days=30)
    assert draft.payment_terms == "Net 30"
    assert draft.warranty_requirement == "1 year minimum"


def test_compile_laptop_request():
    text = "I need to procure laptops and monitors for our new office. Budget is $50,000 total. Need delivery within 30 days."
    draft = compile_request(text, now=NOW)
    assert draft.budget == 50000
    assert draft.title == "Item Procurement"
    assert draft.delivery_deadline == NOW + timedelta(days=30)


@pytest.mark.parametrize("text", [
    "x", "   ", "!!!", "$", ",,,", "0", "0 days", "warranty",
    "deliver in 3000000 days", "99999999999 days", "20 chairs in 600000 weeks",
])
def test_compile_is_total(text):
    draft = compile_request(text, now=NOW)
    assert draft.title
    assert draft.items
    assert draft.budget > 0
    assert draft.delivery_deadline > NOW
    assert draft.payment_terms
    assert draft.warranty_requirement


def test_compile_is_idempotent_with_frozen_clock():
    text = "5 monitors, 27-inch, net 45, 3 weeks, warranty included"
    first = compile_request(text, now=NOW)
    second = compile_request(text, now=NOW)
    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


def test_payload_uses_wire_names():
    draft = compile_request("20 ergonomic chairs", now=NOW)
    payload = draft.to_payload()
    assert set(payload) == {
        "title", "description", "items", "budget",
        "deliveryDeadline", "paymentTerms", "warrantyRequirement",
    }
    assert payload["deliveryDeadline"].startswith("2026-01-31T00:00:00")
    assert payload["items"] == [{"name": "Ergonomic chairs", "quantity": 20}]


def test_draft_summary_text():
    draft = compile_request("Budget $15,000 for 20 ergonomic chairs, net 45", now=NOW)
    summary = format_draft_summary(draft)
    assert "**Ergonomic chairs Procurement**" in summary
    assert "• **Items:** 20x Ergonomic chairs" in summary
    assert "• **Budget:** $15,000" in summary
    assert "• **Delivery:** 1/31/2026" in summary
    assert "• **Payment Terms:** Net 45" in summary
    assert "• **Warranty:** 1 year minimum" in summary
    assert summary.endswith("would you like to modify any details?")
