"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING)

    database_url: str = Field(
        default="sqlite:///./jobhub.db",
        description="Database connection URL used by SQLAlchemy to back the document store",
        min_length=1,
    )
    app_timezone: str = Field(
        default="Europe/Zurich",
        description="IANA timezone or UTC offset used for document timestamps",
    )
    log_level: str = Field(default="INFO", description="Root logger level")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:4200"],
        description="Origins allowed to call the API from a browser",
    )
    mark_read_delay_seconds: float = Field(
        default=2.0,
        description="Delay between opening the notification panel and marking all as read",
        ge=0,
    )
    resubscribe_attempts: int = Field(
        default=3,
        description="Attempts to re-establish a dropped live subscription before marking it stale",
        ge=0,
    )
    resubscribe_delay_seconds: float = Field(
        default=0.5,
        description="Pause between resubscription attempts",
        ge=0,
    )
    reply_count_sweep_interval_seconds: float = Field(
        default=0,
        description="Interval of the reply counter reconciliation sweep; 0 disables it",
        ge=0,
    )
    notification_panel_limit: int = Field(
        default=15,
        description="Maximum number of notifications listed in the panel",
        gt=0,
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
