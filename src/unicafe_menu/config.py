"""Application configuration."""

import os
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from unicafe_menu.adapters.unicafe_client import DEFAULT_BASE_URL

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from ``UNICAFE_*`` environment variables."""

    api_base_url: str = DEFAULT_BASE_URL
    http_timeout_seconds: float = 10.0
    log_level: LogLevel = "WARNING"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="UNICAFE_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value
