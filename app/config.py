"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./travel_guide.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60 * 24,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    app_timezone: str = Field(
        default="Asia/Bangkok",
        description="IANA timezone (or UTC+HH:MM offset) used for stored timestamps",
    )
    public_base_url: str = Field(
        default="http://localhost:5000",
        description="Prefix applied to relative image paths returned to clients",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173"],
        description="Origins allowed to call the API from a browser",
    )
    notification_heartbeat_seconds: float = Field(
        default=15.0,
        description="Seconds between keep-alive frames written to open event streams",
        gt=0,
    )
    notification_history_limit: int = Field(
        default=20,
        description="Maximum number of past notifications replayed on connect",
        gt=0,
    )
    notification_snippet_length: int = Field(
        default=50,
        description="Maximum number of characters kept for stored text snippets",
        gt=0,
    )
    notification_channel_buffer: int = Field(
        default=100,
        description="Frames buffered per event stream before the client is dropped",
        gt=0,
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


__all__ = ["Settings", "get_settings"]
