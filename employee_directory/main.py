from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import requests
from fastapi import FastAPI

from employee_directory.logging_config import configure_app_logging
from employee_directory.routers import api, employees, health
from employee_directory.settings import get_settings

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        configure_app_logging(settings.log_level)
        logger.info("App startup beginning")

        if settings.record_store_config() is None:
            logger.warning("APPER_PROJECT_ID / APPER_PUBLIC_KEY not set; store calls will fail")

        # One pooled HTTP session for every record store call.
        app.state.http_session = requests.Session()

        yield

        # Shutdown
        app.state.http_session.close()

    app = FastAPI(title=settings.title, lifespan=lifespan)

    app.include_router(health.router)
    app.include_router(employees.router)
    app.include_router(api.router)

    return app


app = create_app()
