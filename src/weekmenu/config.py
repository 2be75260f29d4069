"""Lightweight configuration for the menu planner."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Minimal application settings, read from ``WEEKMENU_*`` variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="WEEKMENU_"
    )

    data_dir: Path = Field(default=Path("data"), description="Where the persisted menu record lives")
    storage_key: str = Field(
        default="menu-storage", description="Key under which the menu record is stored"
    )
    random_seed: str | None = Field(
        default=None,
        description="Seed for menu generation; unset draws from system entropy",
    )
    log_level: str = Field(default="INFO", description="Root logging level for the server")
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
