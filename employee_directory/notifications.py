"""User-facing toast messages collected while handling one request."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

logger = logging.getLogger(__name__)

ToastLevel = Literal["success", "error", "info"]


@dataclass(frozen=True)
class Toast:
    level: ToastLevel
    message: str


class Notifier:
    """
    Queue of toasts for the page being rendered.

    Services and forms push messages here instead of returning them; the
    page template drains the queue once.
    """

    def __init__(self) -> None:
        self._toasts: list[Toast] = []

    def success(self, message: str) -> None:
        self._push("success", message)

    def error(self, message: str) -> None:
        self._push("error", message)

    def info(self, message: str) -> None:
        self._push("info", message)

    def _push(self, level: ToastLevel, message: str) -> None:
        logger.debug("toast level=%s message=%s", level, message)
        self._toasts.append(Toast(level=level, message=message))

    @property
    def toasts(self) -> tuple[Toast, ...]:
        return tuple(self._toasts)

    def drain(self) -> list[Toast]:
        """Return pending toasts and clear the queue."""
        toasts, self._toasts = self._toasts, []
        return toasts
