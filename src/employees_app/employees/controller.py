from __future__ import annotations

import uuid

from flask import Flask, redirect, render_template, request, url_for
from werkzeug.exceptions import HTTPException

from ..common.logger import get_logger
from ..common.responses import ActionResult, RedirectResult
from ..container import Container
from ..core.exceptions import EmployeeNotFoundError
from .forms import bind_employee

logger = get_logger(__name__)


def _request_id() -> str:
    return request.headers.get("X-Request-ID") or uuid.uuid4().hex


def register(app: Flask, container: Container) -> None:
    handler = container.employee_handler

    def respond(result: ActionResult):
        if isinstance(result, RedirectResult):
            # 303 so browsers and clients follow PUT/DELETE with a GET
            return redirect(url_for(f"employees_{result.action}"), code=303)
        return render_template(
            f"employees/{result.view_name}.html",
            model=result.model,
            errors=result.errors,
            active_page=result.view_name,
        )

    @app.route("/", endpoint="home")
    def home():
        return redirect(url_for("employees_index"))

    @app.route("/Employees", endpoint="employees_index")
    def employees_index():
        return respond(handler.list())

    @app.route("/Employees/Create", methods=["GET", "POST"], endpoint="employees_create")
    def employees_create():
        if request.method == "POST":
            candidate, errors = bind_employee(request.form)
            return respond(handler.create(candidate, errors))
        return respond(handler.create_form())

    @app.route("/Employees/Edit/<int:employee_id>", endpoint="employees_edit")
    def employees_edit(employee_id: int):
        return respond(handler.edit_form(employee_id))

    # HTML forms can only POST; API clients use PUT/DELETE.
    @app.route("/Employees/Update", methods=["PUT", "POST"], endpoint="employees_update")
    def employees_update():
        candidate, errors = bind_employee(request.form, with_id=True)
        return respond(handler.update(candidate, errors))

    @app.route("/Employees/Delete/<int:employee_id>", methods=["DELETE", "POST"], endpoint="employees_delete")
    def employees_delete(employee_id: int):
        return respond(handler.delete(employee_id))

    @app.route("/Employees/Error", endpoint="employees_error")
    def employees_error():
        return render_template("error.html", request_id=_request_id(), message=None)

    @app.errorhandler(EmployeeNotFoundError)
    def employee_not_found(e: EmployeeNotFoundError):
        logger.warning("%s %s: %s", request.method, request.path, e)
        return render_template("error.html", request_id=_request_id(), message=str(e)), 404

    @app.errorhandler(404)
    def page_not_found(e):
        return render_template("error.html", request_id=_request_id(), message="Page not found"), 404

    @app.errorhandler(Exception)
    def unhandled_error(e: Exception):
        # HTTP errors (405, 400, ...) keep their own status code
        if isinstance(e, HTTPException) and e.code is not None and e.code < 500:
            return render_template("error.html", request_id=_request_id(), message=e.description), e.code
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return render_template("error.html", request_id=_request_id(), message=None), 500
