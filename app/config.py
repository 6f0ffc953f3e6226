# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import get_settings
#   settings = get_settings()
#   app = create_app(settings)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Settings are built once at startup and passed to the app factory, which
# hands them to whatever needs them (Sentry init, logging, docs exposure).
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development

    Nothing is required: without SENTRY_DSN the API runs with monitoring
    disabled.
    """

    # -------------------------------------------------------------------------
    # Sentry Configuration
    # -------------------------------------------------------------------------

    SENTRY_DSN: str | None = Field(
        default=None,
        description="Sentry DSN (e.g., https://key@o0.ingest.sentry.io/0); unset disables monitoring"
    )

    SENTRY_DEBUG: bool = Field(
        default=True,
        description="Print Sentry SDK debug output"
    )

    SENTRY_TRACES_SAMPLE_RATE: float = Field(
        default=1.0,
        ge=0.0,
        le=1.0,
        description="Fraction of requests traced for performance monitoring"
    )

    SENTRY_ENABLE_LOGS: bool = Field(
        default=True,
        description="Forward log records to Sentry Logs"
    )

    SENTRY_ENVIRONMENT: str | None = Field(
        default=None,
        description="Sentry environment name (defaults to ENVIRONMENT)"
    )

    SENTRY_RELEASE: str | None = Field(
        default=None,
        description="Release identifier reported to Sentry"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    HTTPS_REDIRECT: bool = Field(
        default=False,
        description="Redirect plain HTTP requests to HTTPS"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat VAR= as unset
        env_ignore_empty=True,
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    @property
    def sentry_enabled(self) -> bool:
        """Sentry is only initialized when a DSN is configured."""
        return bool(self.SENTRY_DSN)

    @property
    def sentry_environment_name(self) -> str:
        return self.SENTRY_ENVIRONMENT or self.ENVIRONMENT


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()
