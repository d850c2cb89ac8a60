"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # API
    app_name: str = "Storage Stats API"
    app_version: str = "0.1.0"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Logging
    log_level: str = "INFO"

    # MongoDB (unset means the driver default applies)
    mongo_server_selection_timeout_ms: Optional[int] = None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
