"""
Configuration Management Module

This module handles loading, validating, and providing access to client configuration
from environment variables (.env file).

Uses Pydantic Settings for automatic validation and type conversion.

Key Features:
- Loads configuration from .env file
- Provides type-safe access to configuration values
- Handles optional settings with sensible defaults

Usage:
    from core.config import settings

    print(settings.freecurrencyapi_base_url)
    print(settings.freecurrencyapi_api_key)
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional

from core.logging import logger


DEFAULT_BASE_URL = "https://api.freecurrencyapi.com/v1/"


class Settings(BaseSettings):
    """
    Client Settings

    Values are automatically loaded from environment variables or .env file.

    Attributes:
        freecurrencyapi_api_key: API key sent in the `apikey` header
        freecurrencyapi_base_url: Root URL the endpoint paths are appended to
        environment: Current environment (development, production)
        log_level: Logging level for the freecurrencyapi logger tree
    """

    # ============================================
    # Free Currency API Configuration
    # ============================================

    freecurrencyapi_api_key: str = Field(
        default="",
        description="freecurrencyapi.com API key"
    )

    freecurrencyapi_base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="API root URL, must end with a slash"
    )

    # ============================================
    # Application Configuration
    # ============================================

    environment: str = Field(
        default="development",
        description="Application environment (development, production)"
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False
    )

    @property
    def has_api_key(self) -> bool:
        """True if an API key is configured."""
        return bool(self.freecurrencyapi_api_key)


# ============================================
# Global Settings Instance
# ============================================

settings = Settings()


# ============================================
# Configuration Validation
# ============================================

def validate_configuration(base_url: Optional[str] = None) -> None:
    """
    Validate critical configuration settings before making API calls.

    Args:
        base_url: Base URL that will actually be used (e.g., a --base-url
            override). Falls back to FREECURRENCYAPI_BASE_URL.

    Raises:
        ValueError: If the base URL or log level is invalid
    """

    base_url = base_url or settings.freecurrencyapi_base_url
    if not base_url.startswith(("http://", "https://")):
        raise ValueError(
            f"Invalid base URL: '{base_url}'. "
            f"Must start with http:// or https://"
        )

    if not base_url.endswith("/"):
        raise ValueError(
            f"Invalid base URL: '{base_url}'. "
            f"Must end with '/' (endpoint paths are appended to it)"
        )

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if settings.log_level.upper() not in valid_log_levels:
        raise ValueError(
            f"Invalid LOG_LEVEL: '{settings.log_level}'. "
            f"Must be one of: {', '.join(valid_log_levels)}"
        )

    if not settings.has_api_key:
        logger.warning("FREECURRENCYAPI_API_KEY is not set; authenticated calls will return 401")

    logger.info("Configuration validated successfully")
    logger.info(f"Free Currency API: {base_url}")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Log level: {settings.log_level.upper()}")
