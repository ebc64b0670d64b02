"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from pixelsplit.api import health, masks, seams, split

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(seams.router)
api_router.include_router(masks.router)
api_router.include_router(split.router)
