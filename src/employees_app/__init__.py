"""Employees App package.

An employee roster organized by feature modules (employees, database, ...)
with a thin Flask controller layer over a request handler and repository.
"""
