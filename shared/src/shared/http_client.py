"""Factory for outbound async HTTP clients."""
import httpx


def create_http_client(
    timeout: float | None = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create a single-use async HTTP client.

    Transport-level retries are disabled: every call is attempted exactly once.
    ``timeout=None`` waits indefinitely.
    """
    if transport is None:
        transport = httpx.AsyncHTTPTransport(retries=0)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        transport=transport,
    )


def decode_body(response: httpx.Response) -> object:
    """Return the response body as parsed JSON, falling back to raw text."""
    try:
        return response.json()
    except ValueError:
        return response.text
