"""
Engine configuration using Pydantic Settings.

Underwriting thresholds are fixed policy and live in ``mortgage_engine.policy``,
not here.
"""

import logging
import os
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


def get_env_file() -> str:
    """Determine which env file to use based on environment."""
    env = os.getenv("APP_ENV", "development")
    if env == "production":
        return ".env.production"
    return ".env.development"


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    app_name: str = "Mortgage Calculation Engine"
    app_env: str = "development"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    class Config:
        env_file = get_env_file()
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Apply the configured log level and format to the root logger."""
    if settings is None:
        settings = get_settings()

    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format=settings.log_format)
