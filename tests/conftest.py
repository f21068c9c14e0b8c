"""
Pytest fixtures for the test suite.

Nothing here talks to the network: services and forms get a MagicMock store
client, and page tests swap the service dependencies for ones built on it.
"""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from employee_directory.notifications import Notifier
from employee_directory.record_store import RecordStoreClient, RecordStoreConfig

STORE_ENV_VARS = (
    "APPER_PROJECT_ID",
    "APPER_PUBLIC_KEY",
    "VITE_APPER_PROJECT_ID",
    "VITE_APPER_PUBLIC_KEY",
    "APPER_API_URL",
    "APPER_TIMEOUT_SECONDS",
)


@pytest.fixture(autouse=True)
def no_store_credentials(monkeypatch):
    """Tests never pick up real credentials from the developer's shell."""
    for name in STORE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def store_config() -> RecordStoreConfig:
    return RecordStoreConfig(project_id="proj-1", public_key="pk-1", base_url="https://store.test/v1")


@pytest.fixture
def notifier() -> Notifier:
    return Notifier()


@pytest.fixture
def store_client() -> MagicMock:
    """Stand-in for RecordStoreClient; configure return values per test."""
    return MagicMock(spec=RecordStoreClient)


@pytest.fixture
def employee_record() -> dict:
    return {
        "Id": 7,
        "Name": "Jane Doe",
        "first_name_c": "Jane",
        "last_name_c": "Doe",
        "email_c": "jane@example.com",
        "phone_c": "555-0100",
        "role_c": "Engineer",
        "department_id_c": 3,
        "hire_date_c": "2024-02-01",
        "status_c": "active",
        "avatar_c": "",
    }
