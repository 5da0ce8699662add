"""Request correlation middleware."""
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from structlog.contextvars import clear_contextvars

from prompt_relay.logging import bind_request

REQUEST_ID_HEADER = "X-Request-ID"
TRACE_ID_HEADER = "X-Trace-ID"


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Bind request/trace ids to the log context and echo them on the response.

    The route runs in a task holding a copy of this context, so lines logged
    while an SSE body is still streaming keep the ids after ``dispatch`` returns.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        trace_id = request.headers.get(TRACE_ID_HEADER) or request_id
        bind_request(request_id, trace_id, request.method, request.url.path)
        try:
            response = await call_next(request)
        finally:
            clear_contextvars()
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[TRACE_ID_HEADER] = trace_id
        return response
