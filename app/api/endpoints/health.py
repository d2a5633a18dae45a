"""Health check endpoint."""
from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter

from aeo_scanner import __version__
from aeo_scanner.config.settings import settings
from app.api.models.responses import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check API health and the active scoring profile.",
)
async def health_check() -> HealthResponse:
    """Return API health status."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(UTC),
        profile=settings.scoring.profile_name,
    )
