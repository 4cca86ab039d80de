from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", populate_by_name=True, env_prefix=""
    )

    schedules_dir: Path = Field(Path("schedules"), alias="SCHEDULES_DIR")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    parse_workers: int = Field(4, alias="PARSE_WORKERS")

    @field_validator("log_level")
    def validate_log_level(cls, value: str) -> str:
        cleaned = value.strip().upper()
        if not isinstance(logging.getLevelName(cleaned), int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {value!r}")
        return cleaned

    @field_validator("parse_workers")
    def validate_workers(cls, value: int) -> int:
        if value < 1:
            raise ValueError("PARSE_WORKERS must be at least 1")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


__all__ = ["Settings", "get_settings"]
