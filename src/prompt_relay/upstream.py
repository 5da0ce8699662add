"""HTTP client for the OpenAI Responses streaming endpoint."""
from typing import Any, AsyncIterator

import httpx
import structlog

from prompt_relay.config import RelayConfig
from prompt_relay.errors import NetworkError, StreamReadError, UpstreamProtocolError

logger = structlog.get_logger(__name__)

# Success statuses that never carry a body to relay.
_NO_BODY_STATUSES = frozenset({204, 205})


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class UpstreamClient:
    def __init__(self, client: httpx.AsyncClient, config: RelayConfig) -> None:
        self._client = client
        self._config = config

    def build_payload(self, prompt: str) -> dict[str, Any]:
        return {
            "model": self._config.model,
            "input": [
                {"role": "system", "content": self._config.persona},
                {"role": "user", "content": prompt},
            ],
            "stream": True,
        }

    def build_headers(self) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }
        if self._config.organization:
            headers["OpenAI-Organization"] = self._config.organization
        return headers

    async def open_stream(self, prompt: str) -> httpx.Response:
        """POST the prompt and return the response with its body still unread.

        The caller owns the returned response and must close it.
        """
        request = self._client.build_request(
            "POST",
            self._config.upstream_url,
            json=self.build_payload(prompt),
            headers=self.build_headers(),
        )
        try:
            response = await self._client.send(request, stream=True)
        except httpx.TransportError as e:
            raise NetworkError(_describe(e)) from e

        if response.is_success and response.status_code not in _NO_BODY_STATUSES:
            return response
        try:
            text = await self.read_error_text(response)
        finally:
            await self.close(response)
        logger.warning("upstream_error", status=response.status_code)
        raise UpstreamProtocolError(response.status_code, text)

    async def read_error_text(self, response: httpx.Response) -> str:
        """Best-effort read of an error body; a failed read yields ""."""
        try:
            await response.aread()
            return response.text
        except Exception as e:
            logger.debug("upstream_error_body_unreadable", error=_describe(e))
            return ""

    async def iter_chunks(self, response: httpx.Response) -> AsyncIterator[bytes]:
        """Yield non-empty body chunks; any read failure becomes ``StreamReadError``."""
        try:
            async for chunk in response.aiter_bytes():
                if chunk:
                    yield chunk
        except Exception as e:
            raise StreamReadError(_describe(e)) from e

    async def close(self, response: httpx.Response) -> None:
        """Release the upstream connection. Safe to call more than once."""
        await response.aclose()
