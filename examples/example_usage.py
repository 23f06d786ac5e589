"""Example: drive the request handler directly (no HTTP).

Controllers stay thin; the use cases live in EmployeeRequestHandler.
"""

from employees_app.employees.model import Employee
from employees_app.main import create_app


def main():
    app = create_app()
    with app.app_context():
        handler = app.extensions["employees_container"].employee_handler

        result = handler.create(Employee(name="Jane Roe", age=29, account_number="123-45678"))
        print(result.errors)

        print(handler.create(Employee(name="Jane Roe", age=29, account_number="321-9876543210-12")))
        for employee in handler.list().model:
            print(employee)


if __name__ == "__main__":
    main()
