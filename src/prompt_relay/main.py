"""Prompt relay service entrypoint."""
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from prometheus_client import make_asgi_app

from prompt_relay.api.routes import router
from prompt_relay.api.schemas import HealthResponse
from prompt_relay.config import RelaySettings
from prompt_relay.http_client import create_http_client
from prompt_relay.logging import configure_logging
from prompt_relay.middleware import RequestIdMiddleware
from prompt_relay.relay import PromptRelay
from prompt_relay.upstream import UpstreamClient

_settings: RelaySettings | None = None


def get_settings() -> RelaySettings:
    global _settings
    if _settings is None:
        _settings = RelaySettings()
    return _settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: RelaySettings = app.state.settings
    http_client = create_http_client(
        timeout=settings.upstream_timeout_seconds,
        transport=app.state.upstream_transport,
    )
    config = settings.relay_config()
    app.state.relay = PromptRelay(config, UpstreamClient(http_client, config))
    try:
        yield
    finally:
        await http_client.aclose()


def create_app(
    settings: RelaySettings | None = None,
    upstream_transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(json_logs=settings.json_logs)
    app = FastAPI(title="Prompt Relay", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.upstream_transport = upstream_transport
    app.add_middleware(RequestIdMiddleware)

    app.include_router(router)

    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    @app.get("/healthz", response_model=HealthResponse)
    async def healthz() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/readyz", response_model=HealthResponse)
    async def readyz() -> HealthResponse:
        if not app.state.settings.openai_api_key:
            return HealthResponse(status="degraded", detail="OPENAI_API_KEY is not set")
        return HealthResponse(status="ok")

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "prompt_relay.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    run()
