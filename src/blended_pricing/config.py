"""Centralized, typed configuration using pydantic-settings.

Provides a single ``Settings`` class backed by ``.env`` file and environment
variables and a cached ``get_settings()`` accessor.

The pricing engine itself never reads settings; only the command-line layer
does, and passes the values it needs down explicitly.
"""

from __future__ import annotations

import sys
from functools import lru_cache

import structlog
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables and ``.env`` file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # -- General ---------------------------------------------------------------
    production: bool = False
    log_level: str = "INFO"

    # -- Display ---------------------------------------------------------------
    currency: str = "AED"

    # -- Distribution ----------------------------------------------------------
    distribution_samples: int = 101

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        """Normalize the log level name and reject unknown levels."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("distribution_samples")
    @classmethod
    def samples_must_span_axis(cls, v: int) -> int:
        """A curve needs at least both axis endpoints."""
        if v < 2:
            raise ValueError("distribution_samples must be at least 2")
        return v


@lru_cache
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance.

    The ``@lru_cache`` decorator ensures environment variables are parsed
    exactly once.  Call ``get_settings.cache_clear()`` in tests to reset.

    Returns:
        The application ``Settings``.
    """
    try:
        return Settings()
    except ValidationError as exc:
        logger.error("settings_validation_failed", errors=exc.errors())
        sys.exit(1)
