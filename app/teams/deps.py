## Shared LLM client dependency
from typing import List, Optional

from fastapi import Request

from app.agents.llm.base import LLMClient
from app.agents.schemas import Team
from app.settings import Settings


def get_llm(request: Request) -> LLMClient:
    return request.app.state.llm


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_teams_fallback(request: Request) -> Optional[List[Team]]:
    return request.app.state.teams_fallback
