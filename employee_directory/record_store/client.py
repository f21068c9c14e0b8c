"""
HTTP client for the hosted record store.

Background for newcomers:
    The record store is a managed backend: it owns the tables, validates
    field values and assigns record ids. We never talk to its database; every
    read and write is a JSON request against the project's REST endpoint.
    Each call answers with the same envelope (see ``envelope.py``), so a
    rejected write is usually a *successful* HTTP exchange whose body says
    ``"success": false``. Callers must check the envelope, not just the
    status code.

Table operations mirror the browser SDK:

    fetch_records(table, {"fields": [...]})
    get_record_by_id(table, id, {"fields": [...]})
    create_record(table, {"records": [...]})
    update_record(table, {"records": [{"Id": ..., ...}]})
    delete_record(table, {"RecordIds": [...]})
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import requests

from .config import RecordStoreConfig
from .envelope import StoreResponse

logger = logging.getLogger(__name__)


class RecordStoreError(Exception):
    """Raised when the store answers with something that is not an envelope."""

    pass


def field_selection(names: Iterable[str]) -> dict[str, Any]:
    """Build the ``fields`` parameter selecting the given columns."""
    return {"fields": [{"field": {"Name": name}} for name in names]}


class RecordStoreClient:
    """
    Thin wrapper around a ``requests.Session`` bound to one project.

    The project id and public key travel as headers on every request. No
    retries, no caching: one call is one HTTP request.
    """

    def __init__(self, config: RecordStoreConfig, session: requests.Session | None = None) -> None:
        self._config = config
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Apper-Project-Id": config.project_id,
                "Apper-Public-Key": config.public_key,
                "Content-Type": "application/json",
            }
        )

    @property
    def config(self) -> RecordStoreConfig:
        return self._config

    def _table_url(self, table: str, *parts: str) -> str:
        return "/".join([self._config.project_url, "tables", table, "records", *parts])

    def _request(self, method: str, url: str, payload: dict[str, Any]) -> StoreResponse:
        logger.debug("Record store %s %s", method, url)
        resp = self._session.request(method, url, json=payload, timeout=self._config.timeout_seconds)

        try:
            body = resp.json()
        except ValueError:
            body = None

        # The store reports its own failures in the envelope, whatever the status.
        if isinstance(body, dict) and "success" in body:
            return StoreResponse.model_validate(body)

        resp.raise_for_status()
        raise RecordStoreError(f"Unexpected response from record store (status={resp.status_code})")

    def fetch_records(self, table: str, params: dict[str, Any]) -> StoreResponse:
        return self._request("POST", self._table_url(table, "query"), params)

    def get_record_by_id(self, table: str, record_id: int | str, params: dict[str, Any]) -> StoreResponse:
        return self._request("POST", self._table_url(table, str(record_id), "query"), params)

    def create_record(self, table: str, params: dict[str, Any]) -> StoreResponse:
        return self._request("POST", self._table_url(table), params)

    def update_record(self, table: str, params: dict[str, Any]) -> StoreResponse:
        return self._request("PATCH", self._table_url(table), params)

    def delete_record(self, table: str, params: dict[str, Any]) -> StoreResponse:
        return self._request("DELETE", self._table_url(table), params)
