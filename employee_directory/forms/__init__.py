from .employee_form import EMAIL_PATTERN, EmployeeForm, validate_draft

__all__ = ["EMAIL_PATTERN", "EmployeeForm", "validate_draft"]
