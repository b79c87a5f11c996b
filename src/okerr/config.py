"""
Configuration: typed, validated settings loaded from environment/.env.

Uses pydantic-settings so library behaviour that is not part of the Result
contract (diagnostic logging) can be switched on per deployment without
code changes. configure_logging() reads them once at startup:

    OKERR_LOG_CAPTURES=true   # log every failure captured by trycatch()/settle()
    OKERR_LOG_LEVEL=DEBUG
    OKERR_LOG_FORMAT=json

Nothing here changes what a Result holds or how combinators behave.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class OkerrSettings(BaseSettings):
    """
    Root settings for the okerr library.

    Load order (highest priority first):
      1. Environment variables (OKERR_ prefix)
      2. .env file in the working directory
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="OKERR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_captures: bool = Field(
        default=False,
        description="Emit a debug log event for every failure captured by the adapter",
    )
    log_level: str = Field(default="INFO", description="Minimum level passed to structlog")
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Renderer used by configure_logging()",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept standard level names in any case, normalized to upper case."""
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> OkerrSettings:
    """
    Return the process-wide settings, loaded once on first use.

    Call get_settings.cache_clear() to pick up environment changes.
    """
    return OkerrSettings()
