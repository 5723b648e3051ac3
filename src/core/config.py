"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Every setting has a development default so the service starts with
no environment at all.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from src.core.config import settings

    prefix = settings.api_v1_prefix
    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment

_DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, detailed errors)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Widgetsync",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # API configuration
    api_base_url: str = Field(
        default="http://localhost:8000",
        description="API base URL, used for problem type URIs",
    )
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API v1 route prefix",
    )

    # CORS configuration
    cors_origins: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated)",
    )
    cors_allow_credentials: bool = Field(
        default=False,
        description="Allow cookies and authentication headers in CORS requests",
    )

    # Fragment rendering
    template_dir: Path = Field(
        default=_DEFAULT_TEMPLATE_DIR,
        description="Directory holding fragment templates",
    )

    # Error presentation
    system_error_message: str = Field(
        default="We were unable to complete your request. Please try again.",
        description="Generic message shown to users for unexpected failures",
    )

    # Client controller
    client_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout applied by the client controller's HTTP transport",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Level name in any case.

        Returns:
            str: Upper-case level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard level name, got {v!r}")
        return level

    @field_validator("client_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """
        Validate the client timeout is positive.

        Args:
            v: Timeout in seconds.

        Returns:
            float: Validated timeout.

        Raises:
            ValueError: If the timeout is not positive.
        """
        if v <= 0:
            raise ValueError("client_timeout_seconds must be positive")
        return v

    @property
    def cors_origin_list(self) -> list[str]:
        """
        Parse comma-separated CORS origins.

        Returns:
            list[str]: List of origin URLs.
        """
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
