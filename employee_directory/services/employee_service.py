from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from employee_directory.record_store import StoreResponse, field_selection
from employee_directory.schemas.employee import EMPLOYEE_FIELDS

from .base import STORE_ERRORS, RecordService
from .mapping import to_store_record

logger = logging.getLogger(__name__)

EmployeeInput = Mapping[str, Any] | BaseModel


def _as_mapping(data: EmployeeInput) -> Mapping[str, Any]:
    return data.model_dump() if isinstance(data, BaseModel) else data


class EmployeeService(RecordService):
    """
    CRUD over the ``employee_c`` table.

    Records are returned exactly as the store sends them (store field names);
    see ``schemas.employee.EmployeeOut`` for a typed view.
    """

    table_name = "employee_c"

    def get_all(self) -> list[dict[str, Any]]:
        try:
            response = self._require_client().fetch_records(self.table_name, field_selection(EMPLOYEE_FIELDS))
        except STORE_ERRORS as e:
            self._report_exception("Error fetching employees", e)
            return []

        if not self._accepted(response):
            return []
        return list(response.data or [])

    def get_by_id(self, employee_id: int) -> dict[str, Any] | None:
        try:
            response = self._require_client().get_record_by_id(
                self.table_name, employee_id, field_selection(EMPLOYEE_FIELDS)
            )
        except STORE_ERRORS as e:
            self._report_exception(f"Error fetching employee with ID {employee_id}", e)
            return None

        if not response.data:
            logger.info("Employee %s not found", employee_id)
            return None
        return response.data

    def create(self, data: EmployeeInput) -> dict[str, Any] | None:
        params = {"records": [to_store_record(_as_mapping(data))]}
        try:
            response = self._require_client().create_record(self.table_name, params)
        except STORE_ERRORS as e:
            self._report_exception("Error creating employee", e)
            return None
        return self._first_saved(response, "create")

    def update(self, employee_id: int, data: EmployeeInput) -> dict[str, Any] | None:
        params = {"records": [{"Id": employee_id, **to_store_record(_as_mapping(data))}]}
        try:
            response = self._require_client().update_record(self.table_name, params)
        except STORE_ERRORS as e:
            self._report_exception("Error updating employee", e)
            return None
        return self._first_saved(response, "update")

    def delete(self, employee_id: int) -> bool:
        try:
            response = self._require_client().delete_record(self.table_name, {"RecordIds": [employee_id]})
        except STORE_ERRORS as e:
            self._report_exception("Error deleting employee", e)
            return False

        if not self._accepted(response) or response.results is None:
            return False
        successful, failed = response.split_results()
        self._report_failed_records("delete", failed, field_errors=False)
        return bool(successful)

    def _first_saved(self, response: StoreResponse, action: str) -> dict[str, Any] | None:
        """Data of the first successful per-record result, reporting the failed ones."""
        if not self._accepted(response) or response.results is None:
            return None
        successful, failed = response.split_results()
        self._report_failed_records(action, failed)
        return successful[0].data if successful else None
