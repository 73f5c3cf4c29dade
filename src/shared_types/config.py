"""Configuration management for shared-types.

This module handles configuration using Pydantic settings.
Configuration can be loaded from environment variables or .env files.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings with environment variable support.

    All settings can be overridden via environment variables with
    the SHARED_TYPES_ prefix (e.g., SHARED_TYPES_LOG_LEVEL).
    """

    model_config = SettingsConfigDict(
        env_prefix="SHARED_TYPES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Gmail mapping
    gmail_unread_label: str = Field(
        default="UNREAD",
        description="Label ID whose presence marks a message as unread",
    )
    attachment_default_mime_type: str = Field(
        default="application/octet-stream",
        description="MIME type reported for attachment parts that carry none",
    )

    # Application Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="structlog renderer used for log output",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings.

    Returns:
        Settings: Settings instance.
    """
    return Settings()
