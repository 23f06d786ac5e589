"""Binding of submitted form fields to an Employee candidate.

Field names follow the form posted by the Create/Edit pages: Id, Name, Age, AccountNumber.
"""
from __future__ import annotations

from typing import Mapping, Optional, Tuple

from ..common.responses import FieldErrors, add_error
from ..core.constants import INT_MAX, INT_MIN
from .model import Employee


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _parse_int(raw: Optional[str], field_name: str, label: str, errors: FieldErrors) -> Optional[int]:
    value = _clean(raw)
    if value is None:
        return None
    try:
        number = int(value)
    except ValueError:
        number = None
    if number is None or not INT_MIN <= number <= INT_MAX:
        add_error(errors, field_name, f"The value '{value}' is not valid for {label}.")
        return None
    return number


def bind_employee(form: Mapping[str, str], *, with_id: bool = False) -> Tuple[Employee, FieldErrors]:
    errors: FieldErrors = {}
    employee = Employee(
        employee_id=_parse_int(form.get("Id"), "employee_id", "Id", errors) if with_id else None,
        name=_clean(form.get("Name")),
        age=_parse_int(form.get("Age"), "age", "Age", errors),
        account_number=_clean(form.get("AccountNumber")),
    )
    return employee, errors
