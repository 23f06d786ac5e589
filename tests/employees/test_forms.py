from employees_app.employees.forms import bind_employee
from employees_app.employees.model import Employee


def test_bind_full_form():
    employee, errors = bind_employee({"Name": " New Employee ", "Age": "25", "AccountNumber": "214-5874986532-21"})

    assert employee == Employee(name="New Employee", age=25, account_number="214-5874986532-21")
    assert errors == {}


def test_bind_missing_fields_are_none():
    employee, errors = bind_employee({"Name": "", "Age": ""})

    assert employee == Employee()
    assert errors == {}


def test_bind_non_numeric_age():
    employee, errors = bind_employee({"Name": "A", "Age": "abc"})

    assert employee.age is None
    assert errors == {"age": ["The value 'abc' is not valid for Age."]}


def test_bind_id_only_when_requested():
    form = {"Id": "7", "Name": "A", "Age": "1", "AccountNumber": "123-1234567890-12"}

    assert bind_employee(form)[0].employee_id is None
    assert bind_employee(form, with_id=True)[0].employee_id == 7


def test_bind_non_numeric_id():
    employee, errors = bind_employee({"Id": "x"}, with_id=True)

    assert employee.employee_id is None
    assert errors == {"employee_id": ["The value 'x' is not valid for Id."]}


def test_bind_age_outside_int_range():
    employee, errors = bind_employee({"Name": "Big Age", "Age": "99999999999999999999"})

    assert employee.age is None
    assert errors == {"age": ["The value '99999999999999999999' is not valid for Age."]}


def test_bind_int_range_edges():
    assert bind_employee({"Age": "2147483647"})[0].age == 2147483647
    assert bind_employee({"Age": "-2147483648"})[0].age == -2147483648
    assert bind_employee({"Age": "2147483648"})[1] == {"age": ["The value '2147483648' is not valid for Age."]}


def test_bind_id_outside_int_range():
    employee, errors = bind_employee({"Id": "2147483648"}, with_id=True)

    assert employee.employee_id is None
    assert errors == {"employee_id": ["The value '2147483648' is not valid for Id."]}
