import os

# Cheap bcrypt cost for tests; must be set before config is imported.
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient

from app import main
from app.services.store import ChatStore
from app.services.xai_service import XaiService
from tests.helpers import FakeResponse, completion


@pytest.fixture
def store():
    return ChatStore()


@pytest.fixture
def fake_post(monkeypatch):
    """Replace requests.post in the relay; tests set .response and read .calls."""

    class Recorder:
        response = FakeResponse(payload=completion("hello there"))
        error = None
        calls = []

        def __call__(self, url, **kwargs):
            self.calls.append((url, kwargs))
            if self.error is not None:
                raise self.error
            return self.response

    recorder = Recorder()
    recorder.calls = []
    monkeypatch.setattr("app.services.xai_service.requests.post", recorder)
    return recorder


@pytest.fixture
def client(monkeypatch):
    with TestClient(main.app) as test_client:
        monkeypatch.setattr(main, "xai_service", XaiService(api_key="xai-test-key-1234"))
        yield test_client
