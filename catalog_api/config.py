"""
Application Configuration Module

This module uses Pydantic Settings for type-safe configuration management.

Every field can be overridden with an environment variable of the same
name (case-insensitive), or from a local .env file:

    MONGO_URL=mongodb://db.internal/books PORT=9000 RESET_DATABASE=true \\
        python -m catalog_api.main

PATTERN: Settings Singleton
===========================
A single Settings instance is cached using @lru_cache, so the environment
is read once and every module sees the same values.

Usage:
    from catalog_api.config import get_settings

    settings = get_settings()
    print(settings.mongo_url)
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic Settings automatically:
    1. Reads from environment variables (case-insensitive)
    2. Falls back to .env file if env var not found
    3. Validates types and raises errors for invalid values
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="Catalog API",
        description="Application name displayed in docs and logs"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (detailed errors, auto-reload)"
    )
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )
    port: int = Field(
        default=8080,
        description="Port to bind the server to"
    )

    # -------------------------------------------------------------------------
    # Document Store Settings
    # -------------------------------------------------------------------------
    mongo_url: str = Field(
        default="mongodb://localhost/books",
        description="MongoDB connection string"
    )
    mongo_database: str = Field(
        default="books",
        description="Database name used when the connection string has none"
    )
    mongo_timeout_ms: int = Field(
        default=5000,
        ge=1,
        description="Server selection timeout in milliseconds"
    )
    reset_database: bool = Field(
        default=False,
        description="Wipe and seed the demo catalog before serving requests"
    )

    # -------------------------------------------------------------------------
    # CORS Settings
    # -------------------------------------------------------------------------
    allowed_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins"
    )

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def allowed_origins_list(self) -> List[str]:
        """
        Parse comma-separated CORS origins into a list.

        Returns:
            List of allowed origin URLs ("*" allows any origin)
        """
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate that log_level is a valid Python logging level.

        Raises:
            ValueError: If log level is invalid
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("mongo_url")
    @classmethod
    def validate_mongo_url(cls, v: str) -> str:
        """Only accept MongoDB connection strings."""
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError(
                "MONGO_URL must start with mongodb:// or mongodb+srv://"
            )
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    First call creates the Settings instance and reads the environment;
    subsequent calls return the cached instance.

    Returns:
        Cached Settings instance
    """
    return Settings()
