"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from pixelsplit import __version__
from pixelsplit.config import Settings
from pixelsplit.dependencies import get_settings
from pixelsplit.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, environment=settings.pixelsplit_env)
