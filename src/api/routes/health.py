"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.v1.dependencies import get_profile_repository
from core.config import settings
from infrastructure.memory.profile_repo import InMemoryProfileRepository

router = APIRouter(tags=["health"])

VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    profiles: int | None = None


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check(
    repository: InMemoryProfileRepository = Depends(get_profile_repository),
) -> HealthResponse:
    """Report service status and the number of stored profiles."""
    return HealthResponse(
        status="healthy",
        version=VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.app_env,
        profiles=len(repository),
    )
