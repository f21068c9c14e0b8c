"""
Standalone client for the hosted record store.

This package has no dependency on other app packages (services, forms, routers).
Build a RecordStoreClient from a RecordStoreConfig and call its table operations.
"""

from .client import RecordStoreClient, RecordStoreError, field_selection
from .config import RecordStoreConfig
from .envelope import FieldError, RecordResult, StoreResponse

__all__ = [
    "FieldError",
    "RecordResult",
    "RecordStoreClient",
    "RecordStoreConfig",
    "RecordStoreError",
    "StoreResponse",
    "field_selection",
]
