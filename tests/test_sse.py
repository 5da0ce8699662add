"""Tests for SSE event encoding."""
import pytest

from prompt_relay.sse import (
    DataEvent,
    DoneEvent,
    ErrorEvent,
    encode_error_body,
    encode_event,
    encode_events,
    format_sse,
)


def test_done_event_is_literal_sentinel() -> None:
    assert encode_event(DoneEvent()) == b"data: [DONE]\n\n"


def test_data_event_passes_bytes_through() -> None:
    payload = b'event: response.output_text.delta\ndata: {"delta":"Ro"}\n\n'
    assert encode_event(DataEvent(payload)) == payload


def test_error_event_is_json() -> None:
    assert encode_event(ErrorEvent("reset")) == b'data: {"error": "reset"}\n\n'


def test_error_event_keeps_non_ascii() -> None:
    assert encode_event(ErrorEvent("сбой")) == 'data: {"error": "сбой"}\n\n'.encode("utf-8")


def test_format_sse_string_verbatim() -> None:
    assert format_sse("hello") == "data: hello\n\n"


def test_encode_error_body_has_two_events() -> None:
    body = encode_error_body("Missing OPENAI_API_KEY")
    assert body == b'data: {"error": "Missing OPENAI_API_KEY"}\n\ndata: [DONE]\n\n'


def test_encode_event_rejects_unknown() -> None:
    with pytest.raises(TypeError):
        encode_event("data")  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_encode_events_closes_source_when_stopped_early() -> None:
    closed: list[bool] = []

    async def events():
        try:
            yield DataEvent(b"A")
            yield DataEvent(b"B")
        finally:
            closed.append(True)

    stream = encode_events(events())
    assert await stream.__anext__() == b"A"
    await stream.aclose()
    assert closed == [True]
