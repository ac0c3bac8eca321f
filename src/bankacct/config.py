"""Centralized configuration management using pydantic-settings.

Configuration is loaded from environment variables with sensible defaults.
All settings can be overridden via environment variables or a .env file.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Override via environment variables (prefixed with BANKACCT_) or .env file.

    Examples:
        BANKACCT_DATABASE_PATH=/var/lib/bankacct/accounts.txt
        BANKACCT_LOG_LEVEL=DEBUG
        BANKACCT_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="BANKACCT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "bankacct"
    app_version: str = "2.0.0"
    debug: bool = Field(default=False, description="Enable debug mode")

    # Database
    database_path: Path | None = Field(
        default=None,
        description="Database file used when no /D switch is given",
    )
    database_encoding: str = "utf-8"
    report_encoding: str = "utf-8"

    # Logging
    log_level: LogLevel = LogLevel.WARNING
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format: 'json' for machines, 'console' for people",
    )
    log_file: Path | None = Field(default=None, description="Optional log file path")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept lower-case level names from the environment."""
        if isinstance(v, str):
            return v.upper()
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings.

    Returns:
        Configured Settings instance.
    """
    return Settings()
