"""Passim configuration — Pydantic BaseSettings loaded from .env."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

UINT32_MAX = 0xFFFFFFFF


class Settings(BaseSettings):
    """Library settings, overridable via PASSIM_* environment variables."""

    log_level: str = "INFO"

    # Hashing
    hash_chunk_size: int = 64 * 1024  # 64 KB

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PASSIM_",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("hash_chunk_size")
    @classmethod
    def check_chunk_size(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("hash_chunk_size must be positive")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
