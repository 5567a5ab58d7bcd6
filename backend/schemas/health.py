"""Health check response schema."""
from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness of the API and reachability of the equipment database."""

    status: Literal["ok", "degraded"] = "ok"
    service: str = "equipment-api"
    database: Literal["ok", "unavailable"] = "ok"
