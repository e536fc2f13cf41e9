"""Environment-driven settings for geospine.

Manifesto:
    Configuration should be explicit, validated, and environment-driven.
    Processor configuration (the ``{"field": ...}`` block) stays with the
    processor; these settings only cover process-wide defaults such as log
    level and the CLI's failure policy.

Features:
    - **GeoSpineSettings:** log level/format, default destination field,
      failure policy
    - **env_prefix:** ``GEOSPINE_`` namespacing
    - **.env file support:** Automatic loading via pydantic-settings
    - **Extra ignore:** Unknown env vars don't cause startup failures

Examples:
    >>> from geospine.core.settings import get_settings
    >>> get_settings().default_field
    'location'

Tags:
    settings, configuration, pydantic, environment, geospine
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from geospine.core.logging import LOG_LEVELS


class GeoSpineSettings(BaseSettings):
    """Process-wide settings.

    Fields
    ──────
    log_level      : Structlog log level
    log_format     : console | json | auto (JSON when stderr is not a tty)
    default_field  : Destination field used when the CLI gets no --field
    on_failure     : abort | skip, what the CLI does with an invalid document
    """

    model_config = SettingsConfigDict(
        env_prefix="GEOSPINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    log_format: Literal["console", "json", "auto"] = "auto"

    # ── Processing ───────────────────────────────────────────────
    default_field: str = Field(
        default="location",
        min_length=1,
        description="Destination field for the geometry when none is given",
    )
    on_failure: Literal["abort", "skip"] = "abort"

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def json_logs(self) -> bool | None:
        """Map ``log_format`` onto ``configure_logging(json_format=...)``."""
        if self.log_format == "auto":
            return None
        return self.log_format == "json"


@lru_cache(maxsize=1)
def get_settings() -> GeoSpineSettings:
    """Return the cached settings instance."""
    return GeoSpineSettings()
