"""API response schemas."""
from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response for /healthz and /readyz."""

    status: Literal["ok", "degraded"]
    service: str = "prompt-relay"
    detail: str | None = None
