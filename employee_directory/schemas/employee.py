from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator

EmployeeStatus = Literal["active", "inactive"]
EMPLOYEE_STATUSES: tuple[str, ...] = get_args(EmployeeStatus)

# Store column names, in the order the directory shows them.
EMPLOYEE_FIELDS: tuple[str, ...] = (
    "Name",
    "first_name_c",
    "last_name_c",
    "email_c",
    "phone_c",
    "role_c",
    "department_id_c",
    "hire_date_c",
    "status_c",
    "avatar_c",
)


class EmployeeDraft(BaseModel):
    """Unvalidated form copy of an employee, keyed by UI field names.

    Only ``status`` is constrained (and checked on assignment); presence and
    format checks happen when the form is submitted.
    """

    model_config = ConfigDict(validate_assignment=True)

    full_name: str = ""
    email: str = ""
    phone: str = ""
    role: str = ""
    department_id: str = ""
    hire_date: str = ""
    status: EmployeeStatus = "active"


class EmployeeOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int = Field(alias="Id")
    name: str | None = Field(default=None, alias="Name")
    first_name: str | None = Field(default=None, alias="first_name_c")
    last_name: str | None = Field(default=None, alias="last_name_c")
    email: str | None = Field(default=None, alias="email_c")
    phone: str | None = Field(default=None, alias="phone_c")
    role: str | None = Field(default=None, alias="role_c")
    department_id: int | None = Field(default=None, alias="department_id_c")
    hire_date: str | None = Field(default=None, alias="hire_date_c")
    status: EmployeeStatus | None = Field(default=None, alias="status_c")
    avatar: str | None = Field(default=None, alias="avatar_c")

    @field_validator("status", mode="before")
    @classmethod
    def _known_status(cls, value):
        # Stored rows may carry legacy values; those read as no status.
        return value if value in EMPLOYEE_STATUSES else None

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        return f"{self.first_name or ''} {self.last_name or ''}".strip()


class DepartmentOption(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int = Field(alias="Id")
    name: str = Field(default="", alias="Name")
