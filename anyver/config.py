"""Runtime configuration using pydantic-settings.

All fields are overridable via environment variables carrying the ``ANYVER_``
prefix (case-insensitive), e.g. ``ANYVER_ERRATA_STRICT=true``.

Notes:
- ERRATA_STRICT defaults to False, which keeps the historical keyword rule
  where any six-letter run starting with "er" is a post-release marker. Turning
  it on restricts the rule to the literal word "errata"; orderings of stored
  versions may change when flipped.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Top-level library settings."""

    # Keyword table
    ERRATA_STRICT: bool = Field(default=False)

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_JSON: bool = False

    model_config = SettingsConfigDict(env_prefix="ANYVER_", case_sensitive=False)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
