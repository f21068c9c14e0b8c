from __future__ import annotations

from typing import Any

from employee_directory.record_store import field_selection

from .base import STORE_ERRORS, RecordService


class DepartmentService(RecordService):
    """Read-only access to ``department_c``; feeds the department picker."""

    table_name = "department_c"

    def get_all(self) -> list[dict[str, Any]]:
        try:
            response = self._require_client().fetch_records(self.table_name, field_selection(["Name"]))
        except STORE_ERRORS as e:
            self._report_exception("Error fetching departments", e)
            return []

        if not self._accepted(response):
            return []
        return list(response.data or [])
