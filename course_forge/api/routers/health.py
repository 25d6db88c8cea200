"""
Health check API endpoints.

Routes: GET /health, GET /health/providers

Dependencies: course_forge.configs
System role: Health check HTTP API
"""

import os

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from course_forge.api.deps import get_settings_dependency
from course_forge.configs import Settings


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


class ProvidersHealthResponse(BaseModel):
    """Which provider credentials are configured (values are never returned)."""

    llm_configured: bool
    diagram_configured: bool


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/providers", response_model=ProvidersHealthResponse)
async def health_check_providers(
    settings: Settings = Depends(get_settings_dependency),
) -> ProvidersHealthResponse:
    """Report whether LLM and diagram credentials are present."""
    return ProvidersHealthResponse(
        llm_configured=bool(settings.llm.api_key or os.getenv("GOOGLE_API_KEY")),
        diagram_configured=bool(settings.diagram.api_token),
    )
