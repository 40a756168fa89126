"""Settings for railop.

Engine behaviour is fully determined by operation definitions; settings only
cover the ambient concerns around it (how logs are rendered and how much the
dispatcher reports about each call).

Manifesto:
    Configuration should be explicit, validated, and environment-driven.

    - **Pydantic validation:** Type-checked at startup, not runtime
    - **Environment-driven:** Reads ``RAILOP_*`` env vars and .env files
    - **Sensible defaults:** Quiet by default, nothing to configure for tests

Features:
    - **RailopSettings:** log_level, log_json, trace_frames
    - **get_settings():** Cached accessor, ``reset_settings()`` for tests
    - **Extra ignore:** Unknown env vars don't cause startup failures

Examples:
    >>> from railop.core.settings import get_settings
    >>> get_settings().log_level
    'INFO'

Tags:
    settings, configuration, pydantic, environment, railop

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RailopSettings(BaseSettings):
    """Process-wide railop settings.

    Fields
    ──────
    log_level    : Structlog log level used by ``configure_logging()``
    log_json     : Render logs as JSON instead of console output
    trace_frames : Include the execution frame stack in ``operation_finished``
    """

    model_config = SettingsConfigDict(
        env_prefix="RAILOP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    log_json: bool = False
    trace_frames: bool = Field(
        default=False,
        description="Report entered steps and their unwrap state per call",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> RailopSettings:
    """Return the cached settings instance."""
    return RailopSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    get_settings.cache_clear()


__all__ = ["RailopSettings", "get_settings", "reset_settings"]
