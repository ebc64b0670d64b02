"""FastAPI dependency injection."""

from __future__ import annotations

from pixelsplit.config import Settings, settings


def get_settings() -> Settings:
    return settings
