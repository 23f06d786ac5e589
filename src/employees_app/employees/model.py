from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Employee:
    """Domain entity: one employee on the roster.

    Note: Plain data object (no DB access). A candidate coming from a form has
    no `employee_id` yet; the store assigns it on create.
    """

    employee_id: Optional[int] = None
    name: Optional[str] = None
    age: Optional[int] = None
    account_number: Optional[str] = None
