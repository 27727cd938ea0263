"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ..dependencies import ServiceContainer, get_container

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str
    image_host: str


@router.get("/health", response_model=HealthResponse)
async def health_check(container: ServiceContainer = Depends(get_container)) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=container.settings.app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(container: ServiceContainer = Depends(get_container)) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports whether each external collaborator is configured. Does not
    make network calls.
    """
    settings = container.settings
    database_ready = bool(settings.supabase_url and settings.supabase_service_role_key)
    image_host_ready = bool(
        settings.cloudinary_cloud_name
        and settings.cloudinary_api_key
        and settings.cloudinary_api_secret
    )
    return ReadinessResponse(
        status="ready" if database_ready and image_host_ready else "degraded",
        database="configured" if database_ready else "missing",
        image_host="configured" if image_host_ready else "missing",
    )
