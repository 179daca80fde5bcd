"""API response models."""

from pydantic import BaseModel
from typing import Literal


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
    validators: list[str]
