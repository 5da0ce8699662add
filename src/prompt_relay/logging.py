"""structlog setup; request ids travel in structlog's contextvars."""
import sys
from typing import Any

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars


def bind_request(request_id: str, trace_id: str, method: str, path: str) -> None:
    """Start a fresh log context for one inbound request."""
    clear_contextvars()
    bind_contextvars(request_id=request_id, trace_id=trace_id, method=method, path=path)


def configure_logging(json_logs: bool = True) -> None:
    renderer: Any = (
        structlog.processors.JSONRenderer(ensure_ascii=False)
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )
