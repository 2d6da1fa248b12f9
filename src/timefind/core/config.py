# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from timefind.core.constants import WAIT_MARGIN_SECONDS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TIMEFIND_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format", mode="before")
    @classmethod
    def _parse_log_format(cls, v: object) -> str:
        fmt = str(v).strip().lower()
        if fmt not in ("json", "text"):
            raise ValueError(f"log_format must be 'json' or 'text', got {v!r}")
        return fmt

    # Wait adapter
    wait_margin_seconds: float = WAIT_MARGIN_SECONDS

    # CLI
    default_count: int = 5


def get_settings() -> Settings:
    return Settings()
