"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from shadercheck.api.health import router as health_router
from shadercheck.api.shaders import router as shaders_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Validation and classification
api_router.include_router(shaders_router, tags=["Shaders"])
