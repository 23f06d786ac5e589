class DomainError(Exception):
    """Base exception for business rule violations."""


class EmployeeNotFoundError(DomainError):
    """Raised when no employee matches the requested id."""

    def __init__(self, employee_id):
        super().__init__(f"Employee {employee_id} does not exist")
        self.employee_id = employee_id


class AccountNumberFormatError(ValueError):
    """Raised when an account number is not shaped like AAA-BBBBBBBBBB-CC at all.

    Wrong delimiters are a caller mistake, unlike wrong segment lengths which
    are an ordinary validation failure.
    """
