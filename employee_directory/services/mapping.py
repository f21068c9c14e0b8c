"""
Translate between UI field names and record store column names.

The form speaks ``full_name``, ``email``, ``department_id``...; the store
speaks ``Name``, ``email_c``, ``department_id_c``... Callers may pass either
naming (or a mix); store names win when both are present.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any

from employee_directory.schemas.employee import EMPLOYEE_STATUSES, EmployeeDraft

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int(value: Any) -> int | None:
    """
    Parse the leading integer of ``value`` ("12" -> 12, "7 Sales" -> 7).

    Returns None when there is no leading integer.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def _first(data: Mapping[str, Any], *keys: str) -> Any:
    """First truthy value among ``keys``, else None."""
    for key in keys:
        value = data.get(key)
        if value:
            return value
    return None


def to_store_record(data: Mapping[str, Any]) -> dict[str, Any]:
    """Build a store record from form (or store-named) values, defaulting missing fields."""
    full_name = (data.get("full_name") or "").strip()
    words = full_name.split()

    first_name = _first(data, "first_name_c", "first_name") or (words[0] if words else "")
    last_name = _first(data, "last_name_c", "last_name") or " ".join(words[1:])
    name = full_name or f"{first_name} {last_name}".strip()

    return {
        "Name": name,
        "first_name_c": first_name,
        "last_name_c": last_name,
        "email_c": _first(data, "email_c", "email") or "",
        "phone_c": _first(data, "phone_c", "phone") or "",
        "role_c": _first(data, "role_c", "role") or "",
        "department_id_c": parse_int(_first(data, "department_id_c", "department_id") or 0),
        "hire_date_c": _first(data, "hire_date_c", "hire_date") or "",
        "status_c": _first(data, "status_c", "status") or "active",
        "avatar_c": _first(data, "avatar_c", "avatar") or "",
    }


def draft_from_record(record: Mapping[str, Any]) -> EmployeeDraft:
    """Prefill a form draft from a stored employee record."""
    full_name = record.get("Name") or f"{record.get('first_name_c') or ''} {record.get('last_name_c') or ''}".strip()
    department_id = record.get("department_id_c")
    status = record.get("status_c")
    return EmployeeDraft(
        full_name=full_name,
        email=record.get("email_c") or "",
        phone=record.get("phone_c") or "",
        role=record.get("role_c") or "",
        department_id=str(department_id) if department_id else "",
        hire_date=record.get("hire_date_c") or "",
        status=status if status in EMPLOYEE_STATUSES else "active",
    )
