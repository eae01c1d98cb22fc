# app/agents/teams.py
from enum import Enum
from typing import List, Optional

from loguru import logger

from app.agents.llm.base import LLMClient
from app.agents.llm.errors import UpstreamRateLimited, UpstreamUnavailable
from app.agents.schemas import TEAM_LIST, Team


SYSTEM_TEAMS = """You are a sports reference assistant.
Answer with NBA franchises only: each entry has the team name (e.g. "Lakers")
and its home city (e.g. "Los Angeles").
"""


class TeamsPrompt(str, Enum):
    ALL_TEAMS = "Please name all of the teams in the NBA."
    EASTERN_CONFERENCE = "Please name all of the teams in the NBA's Eastern Conference."


def get_teams(
    llm: LLMClient,
    prompt: TeamsPrompt = TeamsPrompt.ALL_TEAMS,
    * ,
    temperature: float = 0.2,
    fallback: Optional[List[Team]] = None,
) -> List[Team]:
    """
    Ask the model for NBA teams and return them in the order the model gave.

    The model is non-deterministic: repeated calls may differ in order or
    content. When `fallback` is given, rate-limit and connectivity failures
    return it instead of raising; auth and parse failures always raise.
    """
    logger.info("Requesting teams ({}) from {}", prompt.name, llm.model)
    try:
        teams = llm.generate_structured(
            TEAM_LIST, system=SYSTEM_TEAMS, user=prompt.value, temperature=temperature
        )
    except (UpstreamRateLimited, UpstreamUnavailable) as e:
        if fallback is None:
            raise
        logger.warning("Returning fallback teams after upstream failure: {}", e)
        return list(fallback)

    logger.info("Model returned {} teams", len(teams))
    return teams
