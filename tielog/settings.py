"""
Settings using pydantic-settings for type-safe configuration.

Values come from TIELOG_* environment variables or a .env file, with
defaults suitable for local use. Settings are loaded once and cached.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR")


class Settings(BaseSettings):
    """
    Settings loaded from environment variables.

    Tests construct Settings(...) directly instead of going through
    get_settings().
    """

    model_config = SettingsConfigDict(
        env_prefix="TIELOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # === Dates ===
    date_format: str = Field(
        default="%m/%d/%Y",
        description="strptime format used when parsing date strings",
    )

    # === Links ===
    strict_participants: bool = Field(
        default=True,
        description="Reject link pairs that contain an uninitialized participant",
    )

    # === Logging ===
    log_level: str = Field(
        default="INFO",
        description="Default log level: TRACE, DEBUG, INFO, WARNING or ERROR",
    )
    log_source: str = Field(
        default="tielog",
        description="Source tag shown in brackets in every log line",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
