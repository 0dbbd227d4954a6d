# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CRONFIELD_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format", mode="before")
    @classmethod
    def _normalize_log_format(cls, v: object) -> str:
        value = str(v).strip().lower()
        if value not in ("json", "text"):
            raise ValueError(f"log_format must be 'json' or 'text', got {v!r}")
        return value

    # Output
    use_names: bool = False  # render month/weekday names instead of numbers
    enumerate_limit: int = 60


def get_settings() -> Settings:
    return Settings()
