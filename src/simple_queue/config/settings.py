"""
Module: settings.py
Description: Package configuration using pydantic-settings.

Reads display and logging options from SIMPLE_QUEUE_* environment
variables, with a .env file supported for local development.
"""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Package settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SIMPLE_QUEUE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    log_level: str = Field(default="INFO", description="Logging level")

    # Attribute rendering
    display_timezone: str = Field(
        default="UTC",
        description="IANA time zone used when rendering queue timestamps"
    )
    strict_attribute_formatting: bool = Field(
        default=False,
        description="Raise instead of passing raw values through when an attribute cannot be formatted"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()

    @field_validator('display_timezone')
    @classmethod
    def validate_display_timezone(cls, v: str) -> str:
        """Validate the display time zone is a known IANA zone."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"display_timezone '{v}' is not a known time zone")
        return v


# Global settings instance
settings = Settings()
