"""
Configuration settings for the application.
"""

import os
from functools import lru_cache
from typing import Optional
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # App identity
    APP_ID: str = os.getenv("APP_ID", "google-drive")
    APP_DISPLAY_NAME: str = os.getenv("APP_DISPLAY_NAME", "Google Drive")
    APP_DESCRIPTION: str = os.getenv(
        "APP_DESCRIPTION", "Connect your Google account and upload files to Google Drive"
    )
    APP_HOMEPAGE_URL: str = os.getenv(
        "APP_HOMEPAGE_URL", "https://github.com/mattermost/mattermost-app-google-drive"
    )
    APP_ROOT_URL: str = os.getenv("APP_ROOT_URL", "http://localhost:4007")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "4007"))
    RELOAD: bool = os.getenv("RELOAD", "False").lower() == "true"

    # Logging
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Outbound HTTP
    HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "30.0"))

    # Storage
    GOOGLE_DATA_KV_KEY: str = os.getenv("GOOGLE_DATA_KV_KEY", "google_data")

    # Drive
    DRIVE_UPLOAD_FOLDER_ID: Optional[str] = os.getenv("DRIVE_UPLOAD_FOLDER_ID") or None

    model_config = ConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
