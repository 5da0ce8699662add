"""Shared async HTTP client for upstream calls."""
import httpx


def create_http_client(
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the async client used for upstream calls.

    Connection retries are disabled: each inbound request makes exactly one
    upstream attempt. ``timeout=None`` waits as long as the upstream takes.
    """
    if transport is None:
        transport = httpx.AsyncHTTPTransport(retries=0)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        transport=transport,
    )
