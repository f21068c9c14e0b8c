"""Response envelope returned by every record store operation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FieldError(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    field_label: str = Field(default="", alias="fieldLabel")
    message: str = ""

    def __str__(self) -> str:
        return f"{self.field_label}: {self.message}"


class RecordResult(BaseModel):
    """Outcome for a single record of a create/update/delete batch."""

    model_config = ConfigDict(extra="allow")

    success: bool = False
    data: dict[str, Any] | None = None
    errors: list[FieldError] | None = None
    message: str | None = None


class StoreResponse(BaseModel):
    """
    ``{success, message?, data?, results?}`` as sent by the store.

    ``data`` is a list of records for fetches and a single record for
    get-by-id; batch mutations report per-record outcomes in ``results``.
    """

    model_config = ConfigDict(extra="allow")

    success: bool = False
    message: str | None = None
    data: Any = None
    results: list[RecordResult] | None = None

    def split_results(self) -> tuple[list[RecordResult], list[RecordResult]]:
        """Return ``(successful, failed)`` per-record results."""
        successful: list[RecordResult] = []
        failed: list[RecordResult] = []
        for result in self.results or []:
            (successful if result.success else failed).append(result)
        return successful, failed
