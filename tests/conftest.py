"""Shared fixtures: a scripted LLM client and an app wired to it."""

import json

import pytest
from fastapi.testclient import TestClient

from app.agents.llm.base import LLMClient
from app.main import create_app
from app.settings import Settings
from app.teams.deps import get_llm

LAKERS_CELTICS = [
    {"teamName": "Lakers", "city": "Los Angeles"},
    {"teamName": "Celtics", "city": "Boston"},
]


class FakeLLMClient(LLMClient):
    """Returns a scripted reply (or raises a scripted error) and records calls."""

    model = "fake-model"

    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    def generate_text(self, *, system: str, user: str, temperature: float = 0.2) -> str:
        self.calls.append({"system": system, "user": user, "temperature": temperature})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_llm():
    return FakeLLMClient(reply=json.dumps(LAKERS_CELTICS))


@pytest.fixture
def test_settings():
    return Settings(
        LLM_PROVIDER="ollama",
        LLM_TEMPERATURE=0.7,
        OPENAI_API_KEY=None,
        TEAMS_FALLBACK_JSON=None,
    )


@pytest.fixture
def app(test_settings, fake_llm):
    app = create_app(test_settings)
    app.dependency_overrides[get_llm] = lambda: fake_llm
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
