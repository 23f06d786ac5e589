import pytest

from employees_app.core.exceptions import EmployeeNotFoundError
from employees_app.database.bootstrap import list_tables, seed_demo_employees
from employees_app.employees.model import Employee
from employees_app.employees.sqlalchemy_employee_repository import SQLAlchemyEmployeeRepository
from employees_app.extensions import db


@pytest.fixture
def repo(app):
    return SQLAlchemyEmployeeRepository(db.session)


def test_schema_and_seed(app, repo):
    assert "employees" in list_tables()
    assert [e.name for e in repo.get_all()] == ["Mark Miler", "Evelin Ayre"]
    assert seed_demo_employees() == 0


def test_create_assigns_id(repo):
    employee = Employee(name="New Employee", age=25, account_number="214-5874986532-21")

    new_id = repo.create(employee)

    assert employee.employee_id == new_id
    assert repo.get_by_id(new_id) == Employee(
        employee_id=new_id, name="New Employee", age=25, account_number="214-5874986532-21"
    )


def test_get_by_id_missing_returns_none(repo):
    assert repo.get_by_id(999) is None


def test_update_changes_only_target(repo):
    mark, evelin = repo.get_all()

    repo.update(Employee(employee_id=mark.employee_id, name="Mark Miller", age=46, account_number=mark.account_number))

    mark_after, evelin_after = repo.get_all()
    assert mark_after.employee_id == mark.employee_id
    assert (mark_after.name, mark_after.age) == ("Mark Miller", 46)
    assert evelin_after == evelin


def test_update_missing_raises(repo):
    with pytest.raises(EmployeeNotFoundError):
        repo.update(Employee(employee_id=999, name="X", age=1, account_number="123-1234567890-12"))


def test_delete_removes_only_target(repo):
    mark, evelin = repo.get_all()

    repo.delete(mark.employee_id)

    assert repo.get_all() == [evelin]


def test_delete_missing_raises(repo):
    with pytest.raises(EmployeeNotFoundError) as exc:
        repo.delete(999)

    assert exc.value.employee_id == 999


def test_ids_are_not_reused_after_delete(repo):
    first = repo.create(Employee(name="A", age=1, account_number="123-1234567890-12"))
    repo.delete(first)

    second = repo.create(Employee(name="B", age=2, account_number="123-1234567890-12"))

    assert second > first
