"""Tests for request-scoped log context."""
from structlog.contextvars import bind_contextvars, clear_contextvars, get_contextvars

from prompt_relay.logging import bind_request


def test_bind_request_replaces_previous_context() -> None:
    bind_contextvars(request_id="old", stale="yes")
    bind_request("req-1", "trace-1", "GET", "/stream")
    try:
        assert get_contextvars() == {
            "request_id": "req-1",
            "trace_id": "trace-1",
            "method": "GET",
            "path": "/stream",
        }
    finally:
        clear_contextvars()
