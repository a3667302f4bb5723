"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from md2resume import __version__
from md2resume.config import load_settings, settings
from md2resume.models.deployment import DeploymentMode

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "healthy"
    version: str
    environment: str
    deployment_mode: DeploymentMode
    timestamp: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check API health status."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.app_env,
        deployment_mode=load_settings().deployment_mode,
        timestamp=datetime.now(timezone.utc),
    )
