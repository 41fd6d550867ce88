"""
Centralized configuration management using Pydantic Settings.

This module provides type-safe configuration management with validation,
loading settings from environment variables and .env files.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Library settings loaded from environment variables.

    All settings can be overridden via environment variables.
    """

    project_name: str = Field(
        default="Movies Library",
        description="Project name used in log output"
    )

    # Store Configuration
    database_url: str = Field(
        default="sqlite+aiosqlite:///./movies_library.db",
        description="Store connection URL (async SQLAlchemy format)"
    )
    database_echo: bool = Field(
        default=False,
        description="Echo every SQL statement (debug only)"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Root log level"
    )
    log_json: bool = Field(
        default=True,
        description="Emit logs as single-line JSON objects"
    )

    # Search Behaviour
    search_case_sensitive: bool = Field(
        default=False,
        description="Match title fragments case-sensitively"
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """
        Validate database URL format.

        Only async drivers are accepted because every repository call is a
        coroutine.
        """
        if not v or v.strip() == "":
            raise ValueError("DATABASE_URL is required and cannot be empty")

        valid_schemes = ["sqlite", "sqlite+aiosqlite", "postgresql+asyncpg"]
        if not any(v.startswith(scheme + "://") for scheme in valid_schemes):
            raise ValueError(
                f"DATABASE_URL must start with one of: {', '.join(valid_schemes)}. "
                f"Got: {v[:20]}..."
            )

        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise LOG_LEVEL to upper case and reject unknown levels."""
        level = str(v).strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of: {', '.join(VALID_LOG_LEVELS)}. Got: {v}"
            )
        return level


# Global settings instance
settings = Settings()
