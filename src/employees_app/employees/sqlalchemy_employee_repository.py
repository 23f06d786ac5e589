from __future__ import annotations

from contextlib import contextmanager
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, scoped_session

from ..core.exceptions import EmployeeNotFoundError
from .model import Employee
from .orm import EmployeeRow
from .repository import EmployeeRepository


def _to_employee(row: EmployeeRow) -> Employee:
    return Employee(
        employee_id=int(row.id),
        name=row.name,
        age=int(row.age),
        account_number=row.account_number,
    )


class SQLAlchemyEmployeeRepository(EmployeeRepository):
    """EmployeeRepository over a (Flask-)SQLAlchemy session.

    Every write is its own unit of work: commit on success, rollback and re-raise on failure.
    """

    def __init__(self, session: Session | scoped_session):
        self._session = session

    @contextmanager
    def _unit_of_work(self):
        try:
            yield self._session
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

    def _get_row(self, employee_id: int) -> EmployeeRow:
        row = self._session.get(EmployeeRow, int(employee_id))
        if row is None:
            raise EmployeeNotFoundError(employee_id)
        return row

    def get_all(self) -> Sequence[Employee]:
        rows = self._session.execute(select(EmployeeRow).order_by(EmployeeRow.id)).scalars().all()
        return [_to_employee(r) for r in rows]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        row = self._session.get(EmployeeRow, int(employee_id))
        return _to_employee(row) if row else None

    def create(self, employee: Employee) -> int:
        with self._unit_of_work() as session:
            row = EmployeeRow(
                name=employee.name,
                age=employee.age,
                account_number=employee.account_number,
            )
            session.add(row)
            session.flush()
            employee.employee_id = int(row.id)
        return employee.employee_id

    def update(self, employee: Employee) -> None:
        with self._unit_of_work():
            row = self._get_row(employee.employee_id)
            row.name = employee.name
            row.age = employee.age
            row.account_number = employee.account_number

    def delete(self, employee_id: int) -> None:
        with self._unit_of_work() as session:
            session.delete(self._get_row(employee_id))
