"""HTTP client for the Gemini generateContent API."""
import httpx

from shared.http_client import create_http_client, decode_body
from shared.logging import get_logger

from soil_advisor.clients.base import CompletionClient
from soil_advisor.clients.schemas import CompletionResponse, build_generate_request
from soil_advisor.errors import UpstreamError, UpstreamRateLimitError

GEMINI_API_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "gemini-2.5-flash-preview-09-2025:generateContent"
)

logger = get_logger(__name__)


class GeminiClient(CompletionClient):
    def __init__(
        self,
        api_key: str,
        timeout: float | None = 60.0,
        url: str = GEMINI_API_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._timeout = timeout
        self._url = url
        self._transport = transport

    async def complete(self, prompt: str) -> CompletionResponse:
        async with create_http_client(timeout=self._timeout, transport=self._transport) as client:
            try:
                resp = await client.post(
                    self._url,
                    params={"key": self._api_key},
                    json=build_generate_request(prompt),
                    headers={"Content-Type": "application/json"},
                )
                resp.raise_for_status()
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                body = decode_body(e.response)
                logger.error("gemini_call_failed", status_code=status, body=body)
                error_cls = UpstreamRateLimitError if status == 429 else UpstreamError
                raise error_cls(
                    f"Request failed with status code {status}",
                    upstream_status=status,
                    body=body,
                ) from e
            except httpx.HTTPError as e:
                message = str(e) or type(e).__name__
                logger.error("gemini_call_failed", error=message)
                raise UpstreamError(message) from e
        try:
            data = resp.json()
        except ValueError:
            logger.warning("gemini_response_not_json", status_code=resp.status_code)
            data = None
        return CompletionResponse.from_payload(data)
