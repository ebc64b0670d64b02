"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pixelsplit_env: str = "development"
    pixelsplit_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Largest image the API will decode (width * height)
    max_image_pixels: int = 50_000_000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
