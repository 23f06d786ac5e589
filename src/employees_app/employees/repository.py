from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): the request handler depends on this interface, never on a concrete store.
    """

    def get_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, employee: Employee) -> int:
        raise NotImplementedError

    def update(self, employee: Employee) -> None:
        raise NotImplementedError

    def delete(self, employee_id: int) -> None:
        raise NotImplementedError
