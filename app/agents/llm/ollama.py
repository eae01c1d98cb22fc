import httpx
from loguru import logger

from app.agents.llm.base import LLMClient
from app.agents.llm.errors import (
    LLMError,
    UpstreamAuthError,
    UpstreamRateLimited,
    UpstreamUnavailable,
)


class OllamaOpenAIClient(LLMClient):
    def __init__(self, base_url: str, model: str, timeout: float = 120.0,
    transport: httpx.BaseTransport | None = None):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.transport = transport

    def generate_text(self, * , system: str, user: str, temperature: float = 0.2) -> str:
        # Ollama OpenAI-compatible endpoint
        # POST {base_url}/chat/completions with OpenAI message format

        url = f"{self.base_url}/chat/completions"
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "temperature": temperature
        }

        headers = {
            "Content-Type": "application/json",
            #OpenAI-compatible clients require an api key field; Ollama ignores it
            "Authorization": "Bearer ollama",
        }

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                r = client.post(url, json=payload, headers=headers)
                r.raise_for_status()
                data = r.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status in (401, 403):
                raise UpstreamAuthError(f"Ollama rejected request ({status})") from e
            if status == 429:
                raise UpstreamRateLimited("Ollama rate limit hit") from e
            if status >= 500:
                raise UpstreamUnavailable(f"Ollama server error ({status})") from e
            raise LLMError(f"Ollama call failed ({status})") from e
        except httpx.RequestError as e:
            raise UpstreamUnavailable(f"Ollama unreachable: {e}") from e
        except ValueError as e:
            raise UpstreamUnavailable(f"Ollama returned a non-JSON body: {e}") from e

        try:
            content = data["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError) as e:
            raise UpstreamUnavailable(f"Ollama reply missing message content: {e!r}") from e
        logger.debug("Received {} chars from {}", len(content), self.model)
        return content
