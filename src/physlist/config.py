"""Lightweight configuration for the physlist tools."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Minimal application settings."""

    model_config = SettingsConfigDict(
        env_prefix="PHYSLIST_", env_file=".env", env_file_encoding="utf-8"
    )

    data_dir: Path = Field(default=Path("physics_lists"), description="Where named physics configurations live")
    log_level: str = Field(default="INFO", description="Logging level for the CLI and API")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call the HTTP API",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    settings = Settings()
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    return settings
