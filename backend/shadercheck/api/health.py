"""Health check endpoint."""

import time
from fastapi import APIRouter

from shadercheck.models.responses import HealthResponse
from shadercheck.validators import validation_engine

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """System health check with the active validator chain."""
    validators = validation_engine.validator_names

    return HealthResponse(
        status="healthy" if validators else "degraded",
        uptime_seconds=round(time.time() - _start_time, 2),
        validators=validators,
    )
