"""
SQL module for building and executing simple table statements.

Each operation has a pure builder returning a Statement and an executor that
runs it against a caller-owned SQLAlchemy Connection or Engine.

Example:
    >>> from sqlalchemy import create_engine
    >>> from tablequery.sql import insert, select
    >>> engine = create_engine("sqlite:///app.db")
    >>> insert(engine, "users", [{"id": 1, "name": "alice"}])
    >>> query, rows = select(engine, "users", ["id", "name"], {"id": 1})
"""

from .core.statement import Statement
from .exceptions import QueryBuildError, QueryError
from .operations import (
    build_delete,
    build_insert,
    build_select,
    build_update,
    delete,
    insert,
    select,
    update,
)
from .results import DeleteResult, InsertResult, SelectResult, UpdateResult

__all__ = [
    "Statement",
    "QueryBuildError",
    "QueryError",
    "SelectResult",
    "InsertResult",
    "UpdateResult",
    "DeleteResult",
    "build_select",
    "build_insert",
    "build_update",
    "build_delete",
    "select",
    "insert",
    "update",
    "delete",
]
