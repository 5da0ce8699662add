"""SSE events emitted by the relay and their wire encoding.

The relay decides *what* to send as a sequence of tagged events; this module
decides *how* each one looks on the wire:

    DataEvent(b"...")      -> the raw upstream bytes, unchanged
    ErrorEvent("reset")    -> data: {"error": "reset"}\\n\\n
    DoneEvent()            -> data: [DONE]\\n\\n
"""
import json
from dataclasses import dataclass
from typing import Any, AsyncGenerator, Union

DONE_SENTINEL = "[DONE]"
SSE_MEDIA_TYPE = "text/event-stream"
SSE_HEADERS = {
    "Cache-Control": "no-cache, no-transform",
    "Connection": "keep-alive",
    "Access-Control-Allow-Origin": "*",
}


@dataclass(frozen=True)
class DataEvent:
    """Upstream bytes; already SSE-framed by the upstream."""

    payload: bytes


@dataclass(frozen=True)
class ErrorEvent:
    message: str


@dataclass(frozen=True)
class DoneEvent:
    pass


SSEEvent = Union[DataEvent, ErrorEvent, DoneEvent]


def format_sse(data: Any) -> str:
    """Frame one `data:` event. Strings go out verbatim, anything else as JSON."""
    text = data if isinstance(data, str) else json.dumps(data, ensure_ascii=False)
    return f"data: {text}\n\n"


def encode_event(event: SSEEvent) -> bytes:
    if isinstance(event, DataEvent):
        return event.payload
    if isinstance(event, ErrorEvent):
        return format_sse({"error": event.message}).encode("utf-8")
    if isinstance(event, DoneEvent):
        return format_sse(DONE_SENTINEL).encode("utf-8")
    raise TypeError(f"Unknown SSE event: {event!r}")


def encode_error_body(message: str) -> bytes:
    """Complete two-event body used when the relay fails before streaming."""
    return encode_event(ErrorEvent(message)) + encode_event(DoneEvent())


async def encode_events(
    events: AsyncGenerator[SSEEvent, None],
) -> AsyncGenerator[bytes, None]:
    try:
        async for event in events:
            yield encode_event(event)
    finally:
        await events.aclose()
