## OpenAI-compatible client (OpenAI, Groq)
import openai
from loguru import logger
from openai import OpenAI

from app.agents.llm.base import LLMClient
from app.agents.llm.errors import (
    LLMError,
    UpstreamAuthError,
    UpstreamRateLimited,
    UpstreamUnavailable,
)


class OpenAICompatibleClient(LLMClient):
    def __init__(self, * , api_key: str, model: str, base_url: str | None = None,
    timeout: float = 60.0):
        self.client = OpenAI(api_key=api_key, base_url=base_url, timeout=timeout, max_retries=0)
        self.model = model

    def generate_text(self, *, system: str, user: str, temperature: float = 0.2) -> str:
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                temperature=temperature,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
            )
        except (openai.AuthenticationError, openai.PermissionDeniedError) as e:
            raise UpstreamAuthError(f"Provider rejected credentials: {e}") from e
        except openai.RateLimitError as e:
            raise UpstreamRateLimited(f"Provider rate limit hit: {e}") from e
        except (openai.APIConnectionError, openai.InternalServerError) as e:
            # APITimeoutError is a subclass of APIConnectionError
            raise UpstreamUnavailable(f"Provider unreachable: {e}") from e
        except openai.APIError as e:
            raise LLMError(f"Provider call failed: {e}") from e

        if not resp.choices:
            raise UpstreamUnavailable(f"{self.model} returned no choices")
        content = resp.choices[0].message.content or ""
        logger.debug("Received {} chars from {}", len(content), self.model)
        return content.strip()
