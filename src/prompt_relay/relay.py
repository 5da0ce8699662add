"""Prompt relay: one prompt in, one upstream stream out as SSE events."""
from typing import AsyncGenerator

import httpx
import structlog

from prompt_relay.config import RelayConfig
from prompt_relay.errors import ConfigurationError, RelayError, StreamReadError
from prompt_relay.metrics import RELAY_RELAYED_BYTES, RELAY_REQUESTS, RELAY_STREAM_FAILURES
from prompt_relay.sse import DataEvent, DoneEvent, ErrorEvent, SSEEvent
from prompt_relay.upstream import UpstreamClient

logger = structlog.get_logger(__name__)


class PromptRelay:
    """Forwards a prompt upstream and turns the reply into SSE events.

    Failures before streaming starts are raised as ``RelayError`` from
    ``open()``; failures while streaming become an ``ErrorEvent``. Every
    stream produced by ``relay()`` ends with exactly one ``DoneEvent``.
    """

    def __init__(self, config: RelayConfig, upstream: UpstreamClient) -> None:
        self._config = config
        self._upstream = upstream

    def resolve_prompt(self, value: str | None) -> str:
        return value if value else self._config.default_prompt

    async def open(self, prompt: str | None) -> httpx.Response:
        """Start the upstream call; the response body is left for ``relay()``."""
        resolved = self.resolve_prompt(prompt)
        try:
            if not self._config.api_key:
                raise ConfigurationError("Missing OPENAI_API_KEY")
            logger.info(
                "upstream_request",
                model=self._config.model,
                prompt_chars=len(resolved),
            )
            response = await self._upstream.open_stream(resolved)
        except RelayError as e:
            RELAY_REQUESTS.labels(outcome=e.kind).inc()
            logger.warning("relay_rejected", kind=e.kind, error=e.message)
            raise
        RELAY_REQUESTS.labels(outcome="streamed").inc()
        return response

    async def relay(self, response: httpx.Response) -> AsyncGenerator[SSEEvent, None]:
        relayed_bytes = 0
        chunks = 0
        try:
            async for chunk in self._upstream.iter_chunks(response):
                relayed_bytes += len(chunk)
                chunks += 1
                RELAY_RELAYED_BYTES.inc(len(chunk))
                yield DataEvent(chunk)
        except StreamReadError as e:
            RELAY_STREAM_FAILURES.inc()
            logger.warning(
                "relay_stream_failed",
                error=e.message,
                relayed_bytes=relayed_bytes,
                chunks=chunks,
            )
            yield ErrorEvent(e.message)
        else:
            logger.info("relay_completed", relayed_bytes=relayed_bytes, chunks=chunks)
        finally:
            await self._upstream.close(response)
        yield DoneEvent()
