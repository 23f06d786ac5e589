from __future__ import annotations

from sqlalchemy import func, inspect, select

from ..common.logger import get_logger
from ..employees.orm import EmployeeRow
from ..extensions import db

logger = get_logger(__name__)

DEMO_EMPLOYEES = (
    {"name": "Mark Miler", "age": 45, "account_number": "123-5673456782-12"},
    {"name": "Evelin Ayre", "age": 32, "account_number": "123-8769874562-32"},
)


def ensure_schema() -> None:
    """Create missing tables (idempotent). Needs an active app context."""
    db.create_all()


def seed_demo_employees() -> int:
    """Insert the demo employees into an empty table; returns how many rows were added."""
    count = db.session.execute(select(func.count()).select_from(EmployeeRow)).scalar_one()
    if count:
        logger.debug("employees table already has %s rows, skipping seed", count)
        return 0

    db.session.add_all(EmployeeRow(**data) for data in DEMO_EMPLOYEES)
    db.session.commit()
    return len(DEMO_EMPLOYEES)


def list_tables() -> list[str]:
    return sorted(inspect(db.engine).get_table_names())
