"""
Shared plumbing for table-backed services.

Every public service operation follows the same contract:
    - the store client is created lazily on first use;
    - failures (store envelope, per-record results, transport errors) are
      logged and shown to the user as toasts;
    - the caller gets a sentinel (``[]``, ``None``, ``False``), never an
      exception.
"""

from __future__ import annotations

import json
import logging

import requests
from pydantic import ValidationError

from employee_directory.notifications import Notifier
from employee_directory.record_store import (
    RecordResult,
    RecordStoreClient,
    RecordStoreConfig,
    RecordStoreError,
    StoreResponse,
)

logger = logging.getLogger(__name__)

# Everything a store call may raise; caught at the service boundary.
STORE_ERRORS = (requests.RequestException, RecordStoreError, ValidationError)


def error_message(exc: Exception) -> str:
    """Prefer the store's own ``message`` from an HTTP error body."""
    if isinstance(exc, requests.HTTPError) and exc.response is not None:
        try:
            body = exc.response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
    return str(exc) or type(exc).__name__


class RecordService:
    table_name: str = ""

    def __init__(
        self,
        client: RecordStoreClient | None = None,
        *,
        config: RecordStoreConfig | None = None,
        notifier: Notifier | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._client = client
        self._config = config
        self._session = session
        self.notifier = notifier or Notifier()

    def initialize_client(self) -> RecordStoreClient | None:
        """Build the store client once; leaves it unset when credentials are missing."""
        if self._client is not None:
            return self._client
        try:
            config = self._config or RecordStoreConfig.from_environ()
        except ValueError as e:
            logger.warning("Record store not configured: %s", e)
            return None
        self._client = RecordStoreClient(config, session=self._session)
        return self._client

    def _require_client(self) -> RecordStoreClient:
        client = self.initialize_client()
        if client is None:
            raise RecordStoreError("Record store client is not initialized")
        return client

    def _accepted(self, response: StoreResponse) -> bool:
        """False (after logging and toasting) when the store rejected the whole call."""
        if response.success:
            return True
        logger.error("Record store rejected request on %s: %s", self.table_name, response.message)
        if response.message:
            self.notifier.error(response.message)
        return False

    def _report_failed_records(self, action: str, failed: list[RecordResult], *, field_errors: bool = True) -> None:
        if not failed:
            return
        logger.error(
            "Failed to %s %d records: %s",
            action,
            len(failed),
            json.dumps([r.model_dump(by_alias=True, exclude_none=True) for r in failed], default=str),
        )
        for record in failed:
            if field_errors:
                for error in record.errors or []:
                    self.notifier.error(str(error))
            if record.message:
                self.notifier.error(record.message)

    def _report_exception(self, context: str, exc: Exception) -> None:
        logger.error("%s: %s", context, error_message(exc))
        self.notifier.error(context)
