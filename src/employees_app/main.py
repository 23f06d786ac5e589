from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .common.logger import get_logger, init_logging
from .config import get_settings_module
from .config.config import mask_database_uri
from .container import build_container
from .database.bootstrap import ensure_schema, list_tables, seed_demo_employees
from .employees.controller import register as register_employees
from .employees.repository import EmployeeRepository
from .extensions import db

logger = get_logger(__name__)


def create_app(
    settings_module: Optional[str] = None,
    *,
    employees_repo: Optional[EmployeeRepository] = None,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config.from_object(settings)
    app.secret_key = getattr(settings, "SECRET_KEY")

    init_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info(
        "settings=%s db=%s", settings_module, mask_database_uri(app.config["SQLALCHEMY_DATABASE_URI"])
    )

    db.init_app(app)

    with app.app_context():
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            ensure_schema()
            logger.info("schema ready (tables=%s)", len(list_tables()))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            added = seed_demo_employees()
            logger.info("demo seed ready (added=%s)", added)

    container = build_container(session=db.session, employees_repo=employees_repo)
    app.extensions["employees_container"] = container

    register_employees(app, container)

    return app
