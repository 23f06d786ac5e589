from __future__ import annotations

from employees_app.config.config import mask_database_uri
from employees_app.database.bootstrap import ensure_schema, list_tables
from employees_app.main import create_app


def main() -> None:
    app = create_app()
    with app.app_context():
        ensure_schema()
        tables = list_tables()
    print(
        "OK: Created schema -> "
        f"{mask_database_uri(app.config['SQLALCHEMY_DATABASE_URI'])} (tables={len(tables)})"
    )


if __name__ == "__main__":
    main()
