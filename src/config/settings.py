"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database configuration (no default - startup fails without it)
    mongo_db_server: str
    mongo_db_name: str = "waitlist"
    waitlist_collection: str = "waitlists"
    mongo_timeout_ms: int = 5000  # Server selection timeout

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 5000

    # Cross-origin policy
    cors_origins: list[str] = ["*"]
    cors_methods: list[str] = ["GET", "POST"]

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
