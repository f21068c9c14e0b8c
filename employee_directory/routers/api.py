from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from employee_directory.dependencies import get_employee_service
from employee_directory.routers.employees import to_employee_out
from employee_directory.schemas.employee import EmployeeOut
from employee_directory.services import EmployeeService

router = APIRouter(prefix="/api", tags=["api"])


@router.get("/employees", response_model=list[EmployeeOut], response_model_by_alias=False)
def list_employees(employees: EmployeeService = Depends(get_employee_service)) -> list[EmployeeOut]:
    # Store failures degrade to an empty list; details are in the logs.
    return to_employee_out(employees.get_all())


@router.get("/employees/{id}", response_model=EmployeeOut, response_model_by_alias=False)
def get_employee(id: int, employees: EmployeeService = Depends(get_employee_service)) -> EmployeeOut:
    record = employees.get_by_id(id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return EmployeeOut.model_validate(record)
