from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Form, Query, Request, Response, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from employee_directory.dependencies import (
    get_department_service,
    get_employee_form,
    get_employee_service,
    get_notifier,
    get_templates,
)
from employee_directory.forms import EmployeeForm
from employee_directory.notifications import Notifier
from employee_directory.schemas.employee import DepartmentOption, EmployeeDraft, EmployeeOut
from employee_directory.services import DepartmentService, EmployeeService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["employees"])

# Outcomes a redirect may announce on the directory page; anything else is ignored.
FLASH_MESSAGES: dict[str, str] = {
    "created": "Employee created successfully",
    "updated": "Employee updated successfully",
    "deleted": "Employee deleted successfully",
}


def to_employee_out(records: list[dict[str, Any]]) -> list[EmployeeOut]:
    """Typed views of store records; records the store sent without an Id are skipped."""
    employees: list[EmployeeOut] = []
    for record in records:
        try:
            employees.append(EmployeeOut.model_validate(record))
        except ValidationError:
            logger.warning("Skipping malformed employee record: %s", record)
    return employees


def _department_names(records: list[dict[str, Any]]) -> dict[int, str]:
    names: dict[int, str] = {}
    for record in records:
        try:
            option = DepartmentOption.model_validate(record)
        except ValidationError:
            logger.warning("Skipping malformed department record: %s", record)
            continue
        names[option.id] = option.name
    return names


def _render_directory(
    request: Request,
    templates: Jinja2Templates,
    employees: EmployeeService,
    departments: DepartmentService,
    notifier: Notifier,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    context = {
        "employees": to_employee_out(employees.get_all()),
        "departments": _department_names(departments.get_all()),
        "toasts": notifier.drain(),
    }
    return templates.TemplateResponse(request, "employees/list.html", context, status_code=status_code)


def _redirect_to_directory(flash: str) -> RedirectResponse:
    return RedirectResponse(url=f"/employees?flash={flash}", status_code=status.HTTP_303_SEE_OTHER)


def _render_form(
    request: Request,
    templates: Jinja2Templates,
    form: EmployeeForm,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    context = {
        "form": form,
        "department_options": [(str(k), v) for k, v in _department_names(form.departments).items()],
        "toasts": form.notifier.drain(),
    }
    return templates.TemplateResponse(request, "employees/form.html", context, status_code=status_code)


@router.get("/", include_in_schema=False)
def index() -> RedirectResponse:
    return RedirectResponse(url="/employees", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/employees", response_class=HTMLResponse)
def directory(
    request: Request,
    flash: str | None = Query(None),
    templates: Jinja2Templates = Depends(get_templates),
    employees: EmployeeService = Depends(get_employee_service),
    departments: DepartmentService = Depends(get_department_service),
    notifier: Notifier = Depends(get_notifier),
) -> HTMLResponse:
    if flash in FLASH_MESSAGES:
        notifier.success(FLASH_MESSAGES[flash])
    return _render_directory(request, templates, employees, departments, notifier)


@router.get("/employees/new", response_class=HTMLResponse)
def new_employee(
    request: Request,
    templates: Jinja2Templates = Depends(get_templates),
    form: EmployeeForm = Depends(get_employee_form),
) -> HTMLResponse:
    form.open()
    return _render_form(request, templates, form)


@router.post("/employees/new", response_class=HTMLResponse)
def create_employee(
    request: Request,
    draft: Annotated[EmployeeDraft, Form()],
    templates: Jinja2Templates = Depends(get_templates),
    form: EmployeeForm = Depends(get_employee_form),
) -> Response:
    form.open()
    form.update(draft.model_dump())
    if form.submit():
        return _redirect_to_directory("created")
    return _render_form(request, templates, form, _failed_submit_status(form))


@router.get("/employees/{employee_id}/edit", response_class=HTMLResponse)
def edit_employee(
    request: Request,
    employee_id: int,
    templates: Jinja2Templates = Depends(get_templates),
    form: EmployeeForm = Depends(get_employee_form),
    employees: EmployeeService = Depends(get_employee_service),
    departments: DepartmentService = Depends(get_department_service),
    notifier: Notifier = Depends(get_notifier),
) -> HTMLResponse:
    record = employees.get_by_id(employee_id)
    if record is None:
        notifier.error("Employee not found")
        return _render_directory(request, templates, employees, departments, notifier, status.HTTP_404_NOT_FOUND)
    form.open(record)
    return _render_form(request, templates, form)


@router.post("/employees/{employee_id}/edit", response_class=HTMLResponse)
def update_employee(
    request: Request,
    employee_id: int,
    draft: Annotated[EmployeeDraft, Form()],
    templates: Jinja2Templates = Depends(get_templates),
    form: EmployeeForm = Depends(get_employee_form),
    employees: EmployeeService = Depends(get_employee_service),
    departments: DepartmentService = Depends(get_department_service),
    notifier: Notifier = Depends(get_notifier),
) -> Response:
    record = employees.get_by_id(employee_id)
    if record is None:
        notifier.error("Employee not found")
        return _render_directory(request, templates, employees, departments, notifier, status.HTTP_404_NOT_FOUND)
    form.open(record)
    form.update(draft.model_dump())
    if form.submit():
        return _redirect_to_directory("updated")
    return _render_form(request, templates, form, _failed_submit_status(form))


@router.post("/employees/{employee_id}/delete", response_class=HTMLResponse)
def delete_employee(
    request: Request,
    employee_id: int,
    templates: Jinja2Templates = Depends(get_templates),
    employees: EmployeeService = Depends(get_employee_service),
    departments: DepartmentService = Depends(get_department_service),
    notifier: Notifier = Depends(get_notifier),
) -> Response:
    if employees.delete(employee_id):
        return _redirect_to_directory("deleted")
    return _render_directory(request, templates, employees, departments, notifier)


def _failed_submit_status(form: EmployeeForm) -> int:
    # Field errors are the client's to fix; anything else was already toasted.
    return status.HTTP_422_UNPROCESSABLE_ENTITY if any(form.errors.values()) else status.HTTP_200_OK
