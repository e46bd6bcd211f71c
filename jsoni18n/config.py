"""Runtime configuration based on environment variables."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class I18nSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="I18N_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    locales_path: Path | None = Field(
        default=None,
        description="Root directory holding the JSON catalog tree.",
    )
    default_language: str = Field(default="en", min_length=1)
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("locales_path", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache
def get_settings() -> I18nSettings:
    """Return cached settings instance."""

    return I18nSettings()


__all__ = ["I18nSettings", "get_settings"]
