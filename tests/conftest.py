from __future__ import annotations

import pytest

from employees_app.main import create_app


@pytest.fixture
def app():
    # Each app gets its own in-memory SQLite engine, seeded with Mark and Evelin.
    app = create_app("employees_app.config.testing")
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def container(app):
    return app.extensions["employees_container"]
