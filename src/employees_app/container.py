from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session, scoped_session

from .employees.handler import EmployeeRequestHandler
from .employees.repository import EmployeeRepository
from .employees.sqlalchemy_employee_repository import SQLAlchemyEmployeeRepository
from .employees.validation import AccountNumberValidator


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    account_number_validator: AccountNumberValidator

    employee_handler: EmployeeRequestHandler


def build_container(
    *,
    session: Session | scoped_session,
    employees_repo: Optional[EmployeeRepository] = None,
    account_number_validator: Optional[AccountNumberValidator] = None,
) -> Container:
    employees_repo = employees_repo or SQLAlchemyEmployeeRepository(session)
    account_number_validator = account_number_validator or AccountNumberValidator()

    employee_handler = EmployeeRequestHandler(employees_repo, account_number_validator)

    return Container(
        employees_repo=employees_repo,
        account_number_validator=account_number_validator,
        employee_handler=employee_handler,
    )
