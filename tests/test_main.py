from app import main
from app.services.xai_service import XaiService
from tests.helpers import FakeResponse


def test_chat_returns_reply(client, fake_post):
    response = client.post("/api/chat", json={"message": "hi"})
    assert response.status_code == 200
    assert response.json() == {"response": "hello there"}


def test_chat_without_message(client, fake_post):
    for kwargs in ({"content": b""}, {"json": {}}, {"json": {"message": ""}}, {"content": b"not json"}):
        response = client.post("/api/chat", **kwargs)
        assert response.status_code == 400
        assert response.json() == {"error": "Message is required"}
    assert fake_post.calls == []


def test_chat_without_api_key(client, fake_post, monkeypatch):
    monkeypatch.setattr(main, "xai_service", XaiService(api_key=""))
    response = client.post("/api/chat", json={"message": "hi"})
    assert response.status_code == 500
    assert response.json() == {"error": "API key not configured"}
    assert fake_post.calls == []


def test_chat_upstream_failure(client, fake_post):
    fake_post.response = FakeResponse(401, {"error": "bad key"}, reason="Unauthorized")
    response = client.post("/api/chat", json={"message": "hi"})
    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Failed to get AI response"
    assert "401" in body["details"]


def test_chat_unexpected_shape(client, fake_post):
    fake_post.response = FakeResponse(payload={"id": "x"})
    response = client.post("/api/chat", json={"message": "hi"})
    assert response.status_code == 500
    assert response.json()["details"] == "Invalid response format from xAI API"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "store": True, "xai_service": True}
