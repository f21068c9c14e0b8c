"""Tests for the add/edit employee dialog state."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from employee_directory.forms import EmployeeForm, validate_draft
from employee_directory.schemas.employee import EmployeeDraft
from employee_directory.services import DepartmentService, EmployeeService

VALID = {
    "full_name": "Jane Doe",
    "email": "jane@example.com",
    "phone": "555-0100",
    "role": "Engineer",
    "department_id": "3",
    "hire_date": "2024-02-01",
}


@pytest.fixture
def employees() -> MagicMock:
    return MagicMock(spec=EmployeeService)


@pytest.fixture
def departments() -> MagicMock:
    mock = MagicMock(spec=DepartmentService)
    mock.get_all.return_value = [{"Id": 3, "Name": "Engineering"}]
    return mock


@pytest.fixture
def form(employees, departments, notifier) -> EmployeeForm:
    return EmployeeForm(employees, departments, notifier=notifier)


def test_empty_draft_reports_every_required_field():
    errors = validate_draft(EmployeeDraft())
    assert errors == {
        "full_name": "Full name is required",
        "email": "Email is required",
        "phone": "Phone is required",
        "role": "Role is required",
        "department_id": "Department is required",
        "hire_date": "Hire date is required",
    }


def test_whitespace_only_values_are_missing():
    errors = validate_draft(EmployeeDraft(**{**VALID, "full_name": "   ", "role": "\t"}))
    assert set(errors) == {"full_name", "role"}


def test_email_without_at_sign_is_rejected():
    errors = validate_draft(EmployeeDraft(**{**VALID, "email": "jane.example.com"}))
    assert errors == {"email": "Please enter a valid email address"}


def test_email_without_domain_dot_is_rejected():
    errors = validate_draft(EmployeeDraft(**{**VALID, "email": "jane@example"}))
    assert errors["email"] == "Please enter a valid email address"


def test_valid_draft_passes():
    assert validate_draft(EmployeeDraft(**VALID)) == {}


def test_open_for_create(form, departments):
    form.open()

    assert form.is_open is True
    assert form.is_edit is False
    assert form.title == "Add New Employee"
    assert form.submit_label == "Create Employee"
    assert form.data == EmployeeDraft()
    assert form.departments == [{"Id": 3, "Name": "Engineering"}]
    departments.get_all.assert_called_once_with()


def test_open_for_edit_prefills_draft(form, employee_record):
    form.open(employee_record)

    assert form.title == "Edit Employee"
    assert form.submit_label == "Update Employee"
    assert form.data.full_name == "Jane Doe"
    assert form.data.department_id == "3"


def test_department_load_failure_is_toasted(form, departments, notifier):
    departments.get_all.side_effect = RuntimeError("boom")

    form.open()

    assert form.is_open is True
    assert [t.message for t in notifier.toasts] == ["Failed to load departments"]


def test_change_clears_pending_error(form):
    form.open()
    form.validate()
    assert form.errors["email"]

    form.change("email", "jane@example.com")

    assert form.data.email == "jane@example.com"
    assert form.errors["email"] == ""
    assert form.errors["phone"] == "Phone is required"


def test_change_unknown_field_raises(form):
    with pytest.raises(KeyError):
        form.change("salary", "100")


def test_update_ignores_unknown_keys(form):
    form.update({**VALID, "csrf": "x"})
    assert form.data == EmployeeDraft(**VALID)


def test_invalid_submit_does_not_call_service(form, employees):
    form.open()

    assert form.submit() is False
    employees.create.assert_not_called()
    assert form.is_open is True


def test_submit_creates_and_closes(form, employees, notifier):
    employees.create.return_value = {"Id": 9, "Name": "Jane Doe"}
    on_success = MagicMock()
    form.open()
    form.update(VALID)

    assert form.submit(on_success) is True

    employees.create.assert_called_once_with(EmployeeDraft(**VALID))
    on_success.assert_called_once_with()
    assert [(t.level, t.message) for t in notifier.toasts] == [("success", "Employee created successfully")]
    assert form.is_open is False
    assert form.data == EmployeeDraft()
    assert form.loading is False


def test_submit_updates_existing_employee(form, employees, employee_record, notifier):
    employees.update.return_value = employee_record
    form.open(employee_record)
    form.change("role", "Lead")

    assert form.submit() is True

    employee_id, draft = employees.update.call_args.args
    assert employee_id == 7
    assert draft.role == "Lead"
    assert [t.message for t in notifier.toasts] == ["Employee updated successfully"]


def test_rejected_save_keeps_dialog_open(form, employees, notifier):
    employees.create.return_value = None
    on_success = MagicMock()
    form.open()
    form.update(VALID)

    assert form.submit(on_success) is False

    on_success.assert_not_called()
    assert form.is_open is True
    assert form.data.full_name == "Jane Doe"
    assert notifier.toasts == ()
    assert form.loading is False


def test_unexpected_error_is_toasted(form, employees, notifier):
    employees.create.side_effect = RuntimeError("store exploded")
    form.open()
    form.update(VALID)

    assert form.submit() is False
    assert [t.message for t in notifier.toasts] == ["store exploded"]
    assert form.loading is False


def test_close_discards_draft(form, employee_record):
    form.open(employee_record)
    form.change("full_name", "")
    form.validate()

    form.close()

    assert form.is_open is False
    assert form.employee is None
    assert form.data == EmployeeDraft()
    assert form.errors == {}


def test_email_with_trailing_newline_is_rejected():
    errors = validate_draft(EmployeeDraft(**{**VALID, "email": "jane@example.com\n"}))
    assert errors == {"email": "Please enter a valid email address"}


def test_draft_status_limited_to_active_or_inactive():
    with pytest.raises(ValidationError):
        EmployeeDraft(**{**VALID, "status": "terminated"})


def test_change_rejects_unknown_status(form):
    form.open()

    with pytest.raises(ValueError, match="status"):
        form.change("status", "terminated")
    assert form.data.status == "active"

    form.change("status", "inactive")
    assert form.data.status == "inactive"


def test_submit_label_while_saving(form, employees):
    labels = []

    def create(draft):
        labels.append(form.submit_label)
        return {"Id": 9}

    employees.create.side_effect = create
    form.open()
    form.update(VALID)

    assert form.submit() is True
    assert labels == ["Saving..."]
    assert form.loading is False
