"""Error taxonomy for the soil analysis flow.

Every error knows the HTTP status it is rendered with; the app's exception
handlers turn them into ``ErrorResponse`` bodies.
"""
from typing import Any

MISSING_FIELDS_MESSAGE = "Missing required fields in the request body."
INVALID_FIELDS_MESSAGE = "Invalid field values in the request body."
RATE_LIMIT_ERROR = "Gemini API rate limit exceeded. (RESOURCE_EXHAUSTED)"
RATE_LIMIT_FALLBACK_MESSAGE = "Quota exceeded. Please wait 1 minute and try again."
INTERNAL_ERROR = "Internal Server Error. Please check your request or server logs."


class SoilAdvisorError(Exception):
    """Base error; ``status_code`` is the HTTP status returned to the caller."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(SoilAdvisorError):
    """Inbound payload is missing required fields or carries invalid values."""

    status_code = 400

    def __init__(self, message: str = MISSING_FIELDS_MESSAGE, detail: str | None = None) -> None:
        super().__init__(message)
        self.detail = detail


class UpstreamError(SoilAdvisorError):
    """Gemini call failed: non-2xx status or transport failure (upstream_status is None)."""

    status_code = 500

    def __init__(
        self,
        message: str,
        upstream_status: int | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status
        self.body = body


class UpstreamRateLimitError(UpstreamError):
    """Gemini answered 429 (RESOURCE_EXHAUSTED)."""

    status_code = 429

    @property
    def quota_message(self) -> str:
        """Upstream ``error.message`` when present, else a generic wait-and-retry hint."""
        if isinstance(self.body, dict):
            error = self.body.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
        return RATE_LIMIT_FALLBACK_MESSAGE
