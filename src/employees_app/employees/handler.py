from __future__ import annotations

from typing import Optional

from ..common.logger import get_logger
from ..common.responses import ActionResult, FieldErrors, RedirectResult, ViewResult, add_error
from ..core.constants import NAME_MAX_LENGTH
from ..core.exceptions import AccountNumberFormatError, EmployeeNotFoundError
from .model import Employee
from .repository import EmployeeRepository
from .validation import AccountNumberValidator

logger = get_logger(__name__)

INDEX = "index"
CREATE = "create"
EDIT = "edit"


class EmployeeRequestHandler:
    """Use cases behind the employee pages: list, create, edit/update, delete.

    Returns response descriptors only; rendering and HTTP belong to the controller.
    Validation failures come back as a view with field errors and never reach the
    repository. Repository errors (e.g. EmployeeNotFoundError) propagate.
    """

    def __init__(self, employees: EmployeeRepository, account_numbers: AccountNumberValidator):
        self._employees = employees
        self._account_numbers = account_numbers

    def list(self) -> ViewResult:
        return ViewResult(INDEX, model=self._employees.get_all())

    def create_form(self) -> ViewResult:
        return ViewResult(CREATE, model=Employee())

    def create(self, candidate: Employee, errors: Optional[FieldErrors] = None) -> ActionResult:
        errors = self._validate(candidate, errors)
        if errors:
            logger.info("Rejected new employee: invalid %s", ", ".join(sorted(errors)))
            return ViewResult(CREATE, model=candidate, errors=errors)

        employee_id = self._employees.create(candidate)
        logger.info("Created employee %s", employee_id)
        return RedirectResult(INDEX)

    def edit_form(self, employee_id: int) -> ViewResult:
        employee = self._employees.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return ViewResult(EDIT, model=employee)

    def update(self, candidate: Employee, errors: Optional[FieldErrors] = None) -> ActionResult:
        errors = dict(errors or {})
        if candidate.employee_id is None and "employee_id" not in errors:
            add_error(errors, "employee_id", "Id is required")
        errors = self._validate(candidate, errors)
        if errors:
            logger.info("Rejected update of employee %s: invalid %s", candidate.employee_id, ", ".join(sorted(errors)))
            return ViewResult(EDIT, model=candidate, errors=errors)

        self._employees.update(candidate)
        logger.info("Updated employee %s", candidate.employee_id)
        return RedirectResult(INDEX)

    def delete(self, employee_id: int) -> RedirectResult:
        self._employees.delete(employee_id)
        logger.info("Deleted employee %s", employee_id)
        return RedirectResult(INDEX)

    def _validate(self, candidate: Employee, errors: Optional[FieldErrors]) -> FieldErrors:
        errors = {field: list(messages) for field, messages in (errors or {}).items()}

        if not candidate.name or not candidate.name.strip():
            add_error(errors, "name", "Name is required")
        elif len(candidate.name) > NAME_MAX_LENGTH:
            add_error(errors, "name", f"Name must be at most {NAME_MAX_LENGTH} characters")
        if candidate.age is None and "age" not in errors:
            add_error(errors, "age", "Age is required")
        if not candidate.account_number:
            add_error(errors, "account_number", "Account number is required")

        # Format is only checked once every required field is present.
        if errors:
            return errors

        try:
            valid = self._account_numbers.is_valid(candidate.account_number)
        except AccountNumberFormatError:
            valid = False
        if not valid:
            add_error(errors, "account_number", "Account Number is invalid")
        return errors
