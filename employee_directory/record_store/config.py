"""Configuration from environment variables. No hardcoded credentials."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.apper.io/v1"
DEFAULT_TIMEOUT_SECONDS = 10


def _getenv(*keys: str, default: str | None = None) -> str | None:
    """Return the first environment variable in ``keys`` that is set and not blank."""
    for key in keys:
        value = os.environ.get(key)
        if value is not None and value.strip():
            return value
    return default


def _getenv_int(key: str, default: int) -> int:
    raw = os.environ.get(key)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class RecordStoreConfig:
    """
    Hosted record store credentials from environment.

    Required:
        APPER_PROJECT_ID: Project the employee and department tables live in.
        APPER_PUBLIC_KEY: Public (browser-safe) key for that project.

    Both also accept the ``VITE_`` prefixed names used by the frontend build.

    Optional:
        APPER_API_URL: Base URL of the record store REST API.
        APPER_TIMEOUT_SECONDS: Per-request timeout (default 10).
    """

    project_id: str
    public_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS

    @property
    def project_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/projects/{self.project_id}"

    @classmethod
    def from_environ(cls) -> RecordStoreConfig:
        project = _strip_or_none(_getenv("APPER_PROJECT_ID", "VITE_APPER_PROJECT_ID"))
        key = _strip_or_none(_getenv("APPER_PUBLIC_KEY", "VITE_APPER_PUBLIC_KEY"))
        if not project or not key:
            raise ValueError("APPER_PROJECT_ID and APPER_PUBLIC_KEY must be set")
        return cls(
            project_id=project,
            public_key=key,
            base_url=_strip_or_none(_getenv("APPER_API_URL")) or DEFAULT_BASE_URL,
            timeout_seconds=_getenv_int("APPER_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        )


def _strip_or_none(s: str | None) -> str | None:
    if s is None:
        return None
    t = s.strip()
    return t if t else None
