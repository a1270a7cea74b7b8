"""Application settings using pydantic-settings."""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration - single source of truth.

    All settings loaded from environment variables or .env files.

    Usage:
        settings = get_settings()
        print(settings.log_level)
    """

    # Application
    environment: Literal["dev", "prod", "test"] = Field(default="dev")
    app_name: str = Field(default="SmartBill")
    app_version: str = Field(default="1.0.0")

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    audit_logger_name: str = Field(default="smartbill.audit")

    # Identity
    id_sequence_start: int = Field(
        default=0,
        ge=0,
        description="Last id considered taken; the fallback generator issues ids after it.",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept any standard logging level name, case-insensitively."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def is_production(self) -> bool:
        return self.environment == "prod"

    @property
    def is_testing(self) -> bool:
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once and cached for the application lifecycle.
    For testing, clear the cache with: get_settings.cache_clear()
    """
    return Settings()
