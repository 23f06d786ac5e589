from __future__ import annotations

from employees_app.config.config import mask_database_uri
from employees_app.database.bootstrap import ensure_schema, seed_demo_employees
from employees_app.main import create_app


def main() -> None:
    app = create_app()
    with app.app_context():
        ensure_schema()
        added = seed_demo_employees()

    print(f"OK: Seeded database -> {mask_database_uri(app.config['SQLALCHEMY_DATABASE_URI'])} (added={added})")


if __name__ == "__main__":
    main()
