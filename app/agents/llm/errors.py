## Errors raised by the LLM clients

class LLMError(Exception):
    """Base class for failures of a model call."""

    kind = "llm_error"
    http_status = 500


class UpstreamAuthError(LLMError):
    # credential missing or rejected by the provider
    kind = "upstream_auth_error"
    http_status = 500


class UpstreamRateLimited(LLMError):
    kind = "upstream_rate_limited"
    http_status = 503


class UpstreamUnavailable(LLMError):
    kind = "upstream_unavailable"
    http_status = 502


class SchemaParseError(LLMError):
    kind = "schema_parse_error"
    http_status = 502

    def __init__(self, message: str, raw: str | None = None):
        super().__init__(message)
        self.raw = raw
