## Application settings configuration
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.agents.schemas import TEAM_LIST, Team


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "dev"
    app_name: str = "nba-teams"
    log_level: str = "INFO"

    LLM_PROVIDER: str = "openai"
    LLM_TEMPERATURE: float = 0.2
    LLM_TIMEOUT_SECONDS: float = 60.0

    OPENAI_API_KEY: Optional[str] = None
    OPENAI_BASE_URL: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o-mini"

    GROQ_API_KEY: Optional[str] = None
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"
    GROQ_MODEL: str = "llama-3.1-8b-instant"

    # Ollama settings
    ollama_base_url: str = "http://localhost:11434/v1"
    ollama_model: str = "llama3.1"

    # JSON array of {"teamName", "city"}; when set, rate-limit and
    # connectivity failures return this list instead of an error
    TEAMS_FALLBACK_JSON: Optional[str] = None

    def fallback_teams(self) -> Optional[List[Team]]:
        if not self.TEAMS_FALLBACK_JSON:
            return None
        return TEAM_LIST.validate_json(self.TEAMS_FALLBACK_JSON)


settings = Settings()
