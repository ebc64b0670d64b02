"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pixelsplit import __version__
from pixelsplit.config import settings
from pixelsplit.engine.errors import PixelsplitError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.pixelsplit_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _engine_error_handler(request: Request, exc: PixelsplitError) -> JSONResponse:
    logger.warning("%s %s rejected: %s: %s", request.method, request.url.path, type(exc).__name__, exc)
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="pixelsplit",
        description="Grid seam detection and mask refinement over raw RGBA buffers",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PixelsplitError, _engine_error_handler)

    from pixelsplit.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
