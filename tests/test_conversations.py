import sys
import os
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

os.environ.setdefault("processing_delay_seconds", "0")

from fastapi.testclient import TestClient

from rfp_assistant.main import app
from rfp_assistant.services.chat_flow import ConversationOrchestrator, get_orchestrator
from rfp_assistant.services.session_store import SessionStore, get_store


def create_test_client():
    app.dependency_overrides.clear()
    store = SessionStore()
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_orchestrator] = lambda: ConversationOrchestrator(processing_delay=0)
    return TestClient(app), store


def test_create_conversation_starts_with_greeting():
    client, store = create_test_client()

    response = client.post("/conversations/")
    assert response.status_code == 201
    data = response.json()
    assert data["state"] == "idle"
    assert data["message_count"] == 1
    assert data["has_draft"] is False
    assert data["last_message"]["role"] == "assistant"
    assert len(store) == 1

    app.dependency_overrides.clear()


def test_send_message_returns_summary_and_keeps_history():
    client, store = create_test_client()
    session_id = client.post("/conversations/").json()["id"]

    text = "Looking for office furniture - 20 ergonomic chairs and 10 standing desks."
    resp = client.post(f"/conversations/{session_id}/messages", json={"content": text})
    assert resp.status_code == 200
    reply = resp.json()
    assert reply["role"] == "assistant"
    assert "**Ergonomic chairs & Standing desks Procurement**" in reply["content"]
    assert "20x Ergonomic chairs, 10x Standing desks" in reply["content"]

    history = client.get(f"/conversations/{session_id}/messages").json()
    assert [m["role"] for m in history] == ["assistant", "user", "assistant"]
    assert [m["id"] for m in history] == [1, 2, 3]
    assert history[1]["content"] == text

    info = client.get(f"/conversations/{session_id}").json()
    assert info["has_draft"] is True
    assert info["message_count"] == 3

    app.dependency_overrides.clear()


def test_send_empty_message_returns_400_without_appending():
    client, store = create_test_client()
    session_id = client.post("/conversations/").json()["id"]

    resp = client.post(f"/conversations/{session_id}/messages", json={"content": "   "})
    assert resp.status_code == 400
    assert len(store.get(session_id).messages) == 1

    app.dependency_overrides.clear()


def test_send_while_processing_returns_409():
    client, store = create_test_client()
    session_id = client.post("/conversations/").json()["id"]
    store.get(session_id).state = "processing"

    resp = client.post(f"/conversations/{session_id}/messages", json={"content": "10 desks"})
    assert resp.status_code == 409
    assert len(store.get(session_id).messages) == 1

    app.dependency_overrides.clear()


def test_unknown_conversation_returns_404():
    client, _ = create_test_client()

    assert client.get("/conversations/missing").status_code == 404
    assert client.get("/conversations/missing/messages").status_code == 404
    assert client.post("/conversations/missing/messages", json={"content": "hi"}).status_code == 404
    assert client.delete("/conversations/missing").status_code == 404

    app.dependency_overrides.clear()


def test_list_and_delete_conversations():
    client, store = create_test_client()
    first = client.post("/conversations/").json()["id"]
    second = client.post("/conversations/").json()["id"]

    listed = client.get("/conversations/").json()
    assert {c["id"] for c in listed} == {first, second}

    resp = client.delete(f"/conversations/{first}")
    assert resp.status_code == 204
    assert store.list_ids() == [second]

    app.dependency_overrides.clear()


def test_example_prompts():
    client, _ = create_test_client()

    resp = client.get("/conversations/examples")
    assert resp.status_code == 200
    examples = resp.json()
    assert len(examples) == 3
    assert examples[1].startswith("Looking for office furniture")

    app.dependency_overrides.clear()
