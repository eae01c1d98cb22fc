## NBA teams routes
from typing import List, Optional

from fastapi import APIRouter, Depends

from app.agents.llm.base import LLMClient
from app.agents.schemas import Team
from app.agents.teams import TeamsPrompt, get_teams
from app.settings import Settings
from app.teams.deps import get_app_settings, get_llm, get_teams_fallback

router = APIRouter()


@router.get("/teams", response_model=List[Team])
def teams(
    llm: LLMClient = Depends(get_llm),
    settings: Settings = Depends(get_app_settings),
    fallback: Optional[List[Team]] = Depends(get_teams_fallback),
):
    return get_teams(llm, TeamsPrompt.ALL_TEAMS,
    temperature=settings.LLM_TEMPERATURE, fallback=fallback)


@router.get("/easternConference", response_model=List[Team])
def eastern_conference(
    llm: LLMClient = Depends(get_llm),
    settings: Settings = Depends(get_app_settings),
    fallback: Optional[List[Team]] = Depends(get_teams_fallback),
):
    return get_teams(llm, TeamsPrompt.EASTERN_CONFERENCE,
    temperature=settings.LLM_TEMPERATURE, fallback=fallback)
