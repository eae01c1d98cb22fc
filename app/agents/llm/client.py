from loguru import logger

from app.settings import Settings, settings as default_settings
from app.agents.llm.base import LLMClient
from app.agents.llm.errors import UpstreamAuthError
from app.agents.llm.ollama import OllamaOpenAIClient
from app.agents.llm.openai_client import OpenAICompatibleClient


def get_llm_client(settings: Settings | None = None) -> LLMClient:
    settings = settings or default_settings
    provider = settings.LLM_PROVIDER.lower()

    if provider == "groq":
        if not settings.GROQ_API_KEY:
            raise UpstreamAuthError("GROQ_API_KEY is not set")
        logger.info("Using Groq model {}", settings.GROQ_MODEL)
        return OpenAICompatibleClient(
            api_key=settings.GROQ_API_KEY,
            base_url=settings.GROQ_BASE_URL,
            model=settings.GROQ_MODEL,
            timeout=settings.LLM_TIMEOUT_SECONDS,
        )

    if provider == "ollama":
        logger.info("Using Ollama model {} at {}", settings.ollama_model, settings.ollama_base_url)
        return OllamaOpenAIClient(
            base_url = settings.ollama_base_url,
            model = settings.ollama_model,
            timeout = settings.LLM_TIMEOUT_SECONDS,
        )

    if provider != "openai":
        raise ValueError(f"Unknown LLM_PROVIDER: {settings.LLM_PROVIDER}")

    if not settings.OPENAI_API_KEY:
        raise UpstreamAuthError("OPENAI_API_KEY is not set")
    logger.info("Using OpenAI model {}", settings.OPENAI_MODEL)
    return OpenAICompatibleClient(
        api_key=settings.OPENAI_API_KEY,
        base_url=settings.OPENAI_BASE_URL,
        model=settings.OPENAI_MODEL,
        timeout=settings.LLM_TIMEOUT_SECONDS,
    )
