"""
Shared fixtures: settings for the content service, a fake OpenAI client,
and a TestClient that never starts the real browser.
"""

import json
import os
import sys
from types import SimpleNamespace

import pytest

# Ensure repo root is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# Settings() is built at import time and needs the credential
os.environ.setdefault("AI_CHAT_API_KEY", "test-key")


VALID_CONTENT = {
    "headline": "งานเปิดบ้านวิชาการ",
    "subheadline": "20 มกราคม",
    "bodyText": "พบกับกิจกรรมมากมาย",
    "accentColor": "#000000",
    "backgroundColor": "#FFFFFF",
    "textColor": "#111111",
    "emojiIcon": "🎉",
    "layoutStyle": "bold",
}


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    def __init__(self, content=None, error=None):
        self.completions = FakeCompletions(content=content, error=error)
        self.chat = SimpleNamespace(completions=self.completions)


@pytest.fixture
def fake_ai(monkeypatch):
    """Install a fake content service; call it with the raw reply text or an error."""
    from quickdesign.services.generator import content

    def install(reply=json.dumps(VALID_CONTENT), error=None):
        fake = FakeOpenAI(content=reply, error=error)
        monkeypatch.setattr(content, "create_client", lambda: fake)
        return fake.completions

    return install


@pytest.fixture
def store(monkeypatch):
    """A fresh session store for every test."""
    from quickdesign.api.routes import design as design_routes
    from quickdesign.services.session_service import SessionStore

    fresh = SessionStore()
    monkeypatch.setattr(design_routes, "session_store", fresh)
    return fresh


@pytest.fixture
def client(store):
    from fastapi.testclient import TestClient

    from quickdesign.main import app

    # Not used as a context manager, so the lifespan (browser start) never runs
    return TestClient(app)
