from __future__ import annotations

from functools import lru_cache

import requests
from fastapi import Depends, Request
from fastapi.templating import Jinja2Templates

from employee_directory.forms import EmployeeForm
from employee_directory.notifications import Notifier
from employee_directory.services import DepartmentService, EmployeeService
from employee_directory.settings import get_settings


@lru_cache
def get_templates() -> Jinja2Templates:
    return Jinja2Templates(directory=str(get_settings().resolved_templates_dir()))


def get_notifier(request: Request) -> Notifier:
    """One toast queue per request, shared by every service the request touches."""
    notifier = getattr(request.state, "notifier", None)
    if notifier is None:
        notifier = Notifier()
        request.state.notifier = notifier
    return notifier


def get_http_session(request: Request) -> requests.Session | None:
    # Created by the app lifespan; absent when the app runs without it (tests).
    return getattr(request.app.state, "http_session", None)


def get_employee_service(
    notifier: Notifier = Depends(get_notifier),
    session: requests.Session | None = Depends(get_http_session),
) -> EmployeeService:
    return EmployeeService(config=get_settings().record_store_config(), notifier=notifier, session=session)


def get_department_service(
    notifier: Notifier = Depends(get_notifier),
    session: requests.Session | None = Depends(get_http_session),
) -> DepartmentService:
    return DepartmentService(config=get_settings().record_store_config(), notifier=notifier, session=session)


def get_employee_form(
    employees: EmployeeService = Depends(get_employee_service),
    departments: DepartmentService = Depends(get_department_service),
    notifier: Notifier = Depends(get_notifier),
) -> EmployeeForm:
    return EmployeeForm(employees, departments, notifier=notifier)
