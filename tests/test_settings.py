"""Tests for settings loading and client construction."""

import pytest
from pydantic import ValidationError

from app.agents.llm.client import get_llm_client
from app.agents.llm.errors import UpstreamAuthError
from app.agents.llm.ollama import OllamaOpenAIClient
from app.agents.llm.openai_client import OpenAICompatibleClient
from app.agents.schemas import Team
from app.settings import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("LLM_PROVIDER", "OPENAI_MODEL", "TEAMS_FALLBACK_JSON"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.LLM_PROVIDER == "openai"
        assert settings.OPENAI_MODEL == "gpt-4o-mini"
        assert settings.fallback_teams() is None

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "groq")
        monkeypatch.setenv("GROQ_API_KEY", "gsk-test")
        monkeypatch.setenv("LLM_TIMEOUT_SECONDS", "15")

        settings = Settings(_env_file=None)

        assert settings.LLM_PROVIDER == "groq"
        assert settings.GROQ_API_KEY == "gsk-test"
        assert settings.LLM_TIMEOUT_SECONDS == 15.0

    def test_fallback_teams_parsed(self):
        settings = Settings(TEAMS_FALLBACK_JSON='[{"teamName": "Bulls", "city": "Chicago"}]')

        assert settings.fallback_teams() == [Team(teamName="Bulls", city="Chicago")]

    def test_invalid_fallback_fails(self):
        settings = Settings(TEAMS_FALLBACK_JSON='[{"teamName": "Bulls"}]')

        with pytest.raises(ValidationError):
            settings.fallback_teams()


class TestGetLLMClient:
    def test_openai_client(self):
        llm = get_llm_client(Settings(LLM_PROVIDER="openai", OPENAI_API_KEY="sk-test"))

        assert isinstance(llm, OpenAICompatibleClient)
        assert llm.model == "gpt-4o-mini"

    def test_groq_client(self):
        llm = get_llm_client(Settings(LLM_PROVIDER="groq", GROQ_API_KEY="gsk-test"))

        assert isinstance(llm, OpenAICompatibleClient)
        assert llm.model == "llama-3.1-8b-instant"

    def test_ollama_client(self):
        llm = get_llm_client(Settings(LLM_PROVIDER="ollama"))

        assert isinstance(llm, OllamaOpenAIClient)

    @pytest.mark.parametrize("provider, key_field", [("openai", "OPENAI_API_KEY"), ("groq", "GROQ_API_KEY")])
    def test_missing_key_is_auth_error(self, provider, key_field):
        settings = Settings(LLM_PROVIDER=provider, **{key_field: None})

        with pytest.raises(UpstreamAuthError):
            get_llm_client(settings)

    def test_unknown_provider(self):
        with pytest.raises(ValueError):
            get_llm_client(Settings(LLM_PROVIDER="bard"))
