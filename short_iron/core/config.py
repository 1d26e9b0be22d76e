"""Application configuration module.

This module contains settings for the Short Iron application,
loaded from environment variables with appropriate defaults.
"""

from __future__ import annotations

import string
from enum import Enum
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Set up basic logger for config module
logger = logging.getLogger(__name__)

# URL-safe alphabet: letters, digits, underscore and hyphen
URL_SAFE_CHARS = string.ascii_letters + string.digits + "_-"


class EnvironmentType(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """Application settings loaded from environment variables with defaults.

    Settings are loaded from environment variables, with fallback to
    values in .env file if present, and finally to the default values
    specified here.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment setting
    ENVIRONMENT: EnvironmentType = EnvironmentType.DEVELOPMENT

    # App Information
    APP_NAME: str = "Short Iron"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "An in-memory URL shortening service"

    # Server Configuration
    HOST: str = "127.0.0.1"
    PORT: int = Field(default=8000, ge=1, le=65535)
    API_PREFIX: str = "/api"
    DEBUG: bool = False

    # Short URL Configuration
    SHORT_URL_HOST: str = "short.fe"  # Prefix of every short URL handed out
    URL_CODE_LENGTH: int = Field(default=10, ge=1)  # Length of generated codes
    URL_CODE_CHARS: str = URL_SAFE_CHARS  # Characters used for generated codes
    URL_CODE_MAX_ATTEMPTS: int = Field(default=16, ge=1)  # Collisions tolerated per insert

    # Logging configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {name}:{function}:{line} | {message}"
    LOG_JSON: bool = True
    LOG_FILE_ENABLED: bool = False
    LOG_DIR: str = "logs"
    LOG_FILENAME: str = "short_iron.log"
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: str = "7 days"
    REQUEST_LOGGING_ENABLED: bool = True  # Enable request logging middleware

    # Validators
    @field_validator("URL_CODE_CHARS")
    def validate_code_chars(cls, v: str) -> str:
        """Require at least two distinct characters to draw codes from."""
        if len(set(v)) < 2:
            raise ValueError("URL_CODE_CHARS must contain at least two distinct characters")
        if len(set(v)) != len(v):
            logger.warning("URL_CODE_CHARS contains duplicate characters; distribution will be skewed")
        return v

    @field_validator("SHORT_URL_HOST", "API_PREFIX")
    def strip_trailing_slash(cls, v: str) -> str:
        """Drop trailing slashes so paths can be joined with a single '/'."""
        return v.rstrip("/")

    @field_validator("LOG_LEVEL")
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


# Create a singleton instance of the settings
settings = Settings()
