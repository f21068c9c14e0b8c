from __future__ import annotations

import logging


def configure_app_logging(level: str = "INFO") -> None:
    """
    Minimal logging configuration for this repo.

    Notes:
    - stdlib logging only; uvicorn already installs handlers when serving.
    - When nothing has configured the root logger (e.g. running the app in a
      script), a basic stderr handler is added so store failures are visible.
    - Set `APP_LOG_LEVEL=DEBUG` (or INFO/WARNING/ERROR) to control verbosity.
    """

    normalized = level.upper()
    if not logging.getLogger().handlers:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("employee_directory").setLevel(normalized)
    # Ensure child loggers under employee_directory.* inherit this level.
    logging.getLogger("employee_directory").propagate = True
