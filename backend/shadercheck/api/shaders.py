"""Shader endpoints — validate and classify submitted source.

A shader that fails validation is still a successful request: the response
carries valid=false and the ordered diagnostics for the caller to surface.
"""

import structlog
from fastapi import APIRouter, HTTPException

from shadercheck.config import get_settings
from shadercheck.models.requests import ShaderSourceRequest
from shadercheck.validators import ShaderDocument, ValidationResult, classify, validation_engine

logger = structlog.get_logger()

router = APIRouter()


def _check_size(source: str) -> None:
    """Reject sources above the configured size before any work is done."""
    limit = get_settings().MAX_SOURCE_LENGTH
    if len(source) > limit:
        logger.warning("source_rejected", length=len(source), limit=limit)
        raise HTTPException(
            status_code=413,
            detail=f"Shader source is {len(source)} characters; the limit is {limit}.",
        )


@router.post("/validate", response_model=ValidationResult)
async def validate_shader(request: ShaderSourceRequest):
    """Validate shader source and return the verdict with all diagnostics."""
    _check_size(request.source)
    return validation_engine.validate(request.source)


@router.post("/classify", response_model=ShaderDocument)
async def classify_shader(request: ShaderSourceRequest):
    """Return the classified document the validators operate on."""
    _check_size(request.source)
    return classify(request.source)
