"""Relay API routes."""
from fastapi import APIRouter, Request
from fastapi.responses import Response, StreamingResponse
from starlette.background import BackgroundTask

from prompt_relay.errors import RelayError
from prompt_relay.relay import PromptRelay
from prompt_relay.sse import SSE_HEADERS, SSE_MEDIA_TYPE, encode_error_body, encode_events

router = APIRouter(tags=["relay"])


def _first_query_value(request: Request, name: str) -> str | None:
    values = request.query_params.getlist(name)
    return values[0] if values else None


@router.get("/stream")
async def stream(request: Request) -> Response:
    """Relay ``?prompt=`` to the upstream model as Server-Sent Events."""
    relay: PromptRelay = request.app.state.relay
    try:
        upstream = await relay.open(_first_query_value(request, "prompt"))
    except RelayError as e:
        return Response(
            content=encode_error_body(e.message),
            media_type=SSE_MEDIA_TYPE,
            headers=SSE_HEADERS,
        )
    return StreamingResponse(
        encode_events(relay.relay(upstream)),
        media_type=SSE_MEDIA_TYPE,
        headers=SSE_HEADERS,
        background=BackgroundTask(upstream.aclose),
    )
