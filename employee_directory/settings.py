from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from employee_directory.record_store import RecordStoreConfig


class Settings(BaseSettings):
    """
    App settings.

    Notes:
    - Record store credentials are read separately by ``RecordStoreConfig.from_environ``
      so the store client stays usable without this module.
    - Allow overriding via env vars (``APP_LOG_LEVEL``, ``APP_TITLE``).
    """

    model_config = SettingsConfigDict(env_prefix="APP_", extra="ignore")

    title: str = "Employee Directory"
    log_level: str = "INFO"
    templates_dir: str | None = None

    def resolved_templates_dir(self) -> Path:
        if self.templates_dir:
            return Path(self.templates_dir)

        return Path(__file__).resolve().parent / "templates"

    def record_store_config(self) -> RecordStoreConfig | None:
        """Return store credentials, or None when the environment lacks them."""
        try:
            return RecordStoreConfig.from_environ()
        except ValueError:
            return None


@lru_cache
def get_settings() -> Settings:
    return Settings()
