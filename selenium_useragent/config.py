"""
Runtime configuration for selenium-useragent.

Uses ``pydantic_settings.BaseSettings`` so values can come from the
environment or a local ``.env`` file.
"""

from __future__ import annotations

import functools

import pydantic
import pydantic_settings


class Settings(pydantic_settings.BaseSettings):
    """Package settings.

    Attributes:
        devices_file: Path to a device dataset JSON that replaces the
            bundled ``devices.json``.
        debug: Emit debug-level log lines.
    """

    model_config = pydantic_settings.SettingsConfigDict(env_file=".env", extra="ignore")

    devices_file: str | None = pydantic.Field(default=None, validation_alias="SELENIUM_UA_DEVICES_FILE")
    debug: bool = pydantic.Field(default=False, validation_alias="SELENIUM_UA_DEBUG")


@functools.cache
def get_settings() -> Settings:
    """Return the process-wide settings (read once, then cached)."""
    return Settings()


def reset_settings() -> None:
    """Drop cached settings and the cached dataset so the next access re-reads them."""
    from selenium_useragent.data import loader

    get_settings.cache_clear()
    loader.clear_cache()
