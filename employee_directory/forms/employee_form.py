"""
State of the add/edit employee dialog.

The dialog is either closed or open; while open it holds a draft that is
only sent to the store on a valid submit. Closing discards the draft.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from employee_directory.notifications import Notifier
from employee_directory.schemas.employee import EmployeeDraft
from employee_directory.services import DepartmentService, EmployeeService
from employee_directory.services.mapping import draft_from_record

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# (field, message) checked in display order; text fields are trimmed first.
_REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("full_name", "Full name is required"),
    ("email", "Email is required"),
    ("phone", "Phone is required"),
    ("role", "Role is required"),
    ("department_id", "Department is required"),
    ("hire_date", "Hire date is required"),
)


def validate_draft(draft: EmployeeDraft) -> dict[str, str]:
    """Return field -> message for every problem in ``draft`` (empty when valid)."""
    errors: dict[str, str] = {}
    for name, message in _REQUIRED_FIELDS:
        if not str(getattr(draft, name)).strip():
            errors[name] = message

    if draft.email and not EMAIL_PATTERN.fullmatch(draft.email):
        errors["email"] = "Please enter a valid email address"
    return errors


class EmployeeForm:
    """Add/edit dialog: collects a draft, validates it, submits it through the employee service."""

    def __init__(
        self,
        employees: EmployeeService,
        departments: DepartmentService,
        notifier: Notifier | None = None,
    ) -> None:
        self._employees = employees
        self._departments = departments
        self.notifier = notifier or employees.notifier
        self.is_open = False
        self.loading = False
        self.employee: dict[str, Any] | None = None
        self.data = EmployeeDraft()
        self.departments: list[dict[str, Any]] = []
        self.errors: dict[str, str] = {}

    @property
    def is_edit(self) -> bool:
        return self.employee is not None

    @property
    def title(self) -> str:
        return "Edit Employee" if self.is_edit else "Add New Employee"

    @property
    def submit_label(self) -> str:
        if self.loading:
            return "Saving..."
        return "Update Employee" if self.is_edit else "Create Employee"

    def open(self, employee: dict[str, Any] | None = None) -> None:
        self.employee = employee
        self.data = draft_from_record(employee) if employee is not None else EmployeeDraft()
        self.is_open = True
        self.load_departments()

    def load_departments(self) -> None:
        try:
            self.departments = self._departments.get_all()
        except Exception:
            logger.exception("Loading departments failed")
            self.notifier.error("Failed to load departments")

    def change(self, name: str, value: Any) -> None:
        """Set one draft field. Raises KeyError for unknown fields, ValueError for a status outside active/inactive."""
        if name not in EmployeeDraft.model_fields:
            raise KeyError(name)
        try:
            setattr(self.data, name, "" if value is None else str(value))
        except ValidationError as e:
            raise ValueError(f"Invalid value for {name}: {value!r}") from e
        if self.errors.get(name):
            self.errors[name] = ""

    def update(self, values: dict[str, Any]) -> None:
        """Apply submitted form values, ignoring keys that are not draft fields."""
        for name, value in values.items():
            if name in EmployeeDraft.model_fields:
                self.change(name, value)

    def validate(self) -> bool:
        self.errors = validate_draft(self.data)
        return not self.errors

    def submit(self, on_success: Callable[[], None] | None = None) -> bool:
        """
        Validate and save the draft.

        Returns True when the store accepted the record; the dialog is then
        closed. On a rejected save the dialog stays open with the draft intact.
        """
        if not self.validate():
            return False

        self.loading = True
        try:
            if self.employee is not None:
                saved = self._employees.update(self.employee["Id"], self.data)
                success_message = "Employee updated successfully"
            else:
                saved = self._employees.create(self.data)
                success_message = "Employee created successfully"

            if saved is None:
                return False

            self.notifier.success(success_message)
            if on_success is not None:
                on_success()
            self.close()
            return True
        except Exception as e:
            logger.exception("Saving employee failed")
            self.notifier.error(str(e) or "Failed to save employee")
            return False
        finally:
            self.loading = False

    def close(self) -> None:
        self.data = EmployeeDraft()
        self.errors = {}
        self.employee = None
        self.is_open = False
