from .department_service import DepartmentService
from .employee_service import EmployeeService

__all__ = ["DepartmentService", "EmployeeService"]
