"""Environment configuration and validation.

This module defines strongly-typed application settings loaded from environment variables
(optionally via a local `.env` file).

The search timezone decides which calendar day counts as "today" for the departure date rule, so
it is validated at startup rather than on first use.
"""

from __future__ import annotations

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    search_timezone: str = Field(default="UTC", alias="SEARCH_TIMEZONE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("search_timezone")
    @classmethod
    def validate_search_timezone(cls, value: str) -> str:
        """Validate that the timezone is a known IANA zone name."""

        value = value.strip()
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"SEARCH_TIMEZONE is not a known timezone: {value!r}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        return level


def load_settings(**overrides: str) -> Settings:
    """Load and validate settings from environment variables.

    Keyword overrides (by field name) take precedence over the environment.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    try:
        return Settings(**overrides)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
