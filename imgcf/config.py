"""Configuration helpers for image URL rewriting."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    rewrite_urls: bool = Field(default=False, alias="IMG_CF_REWRITE_URLS")

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", populate_by_name=True
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached img-cf settings."""

    return Settings()  # type: ignore[call-arg]


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
