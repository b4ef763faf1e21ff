"""
Statement execution against an injected SQLAlchemy handle.

The handle is either a Connection (caller owns the transaction) or an Engine
(each call runs in its own ``engine.begin()`` block). Driver failures are
re-raised as QueryError with the original exception attached and chained.
"""

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Union

from sqlalchemy import Connection, CursorResult, Engine
from sqlalchemy.exc import SQLAlchemyError

from tablequery.config import get_settings
from tablequery.utils.logging import bind_context

from .core.statement import Statement
from .exceptions import QueryError

Handle = Union[Connection, Engine]


def handle_paramstyle(handle: Handle) -> str:
    """DBAPI paramstyle of the driver behind ``handle``."""
    return handle.dialect.paramstyle


@contextmanager
def connection_scope(handle: Handle) -> Iterator[Connection]:
    """
    Yield a Connection for a single operation.

    Engines check out a pooled connection inside ``begin()``, committing on
    success and rolling back on error. Connections are yielded as-is.
    """
    if isinstance(handle, Engine):
        with handle.begin() as connection:
            yield connection
    else:
        yield handle


@contextmanager
def statement_errors(operation: str, table: str, statement: Statement) -> Iterator[None]:
    """Translate SQLAlchemy errors raised in the block into QueryError."""
    try:
        yield
    except SQLAlchemyError as exc:
        bind_context(__name__, operation=operation, table=table).warning(
            "sql.statement_failed",
            query=statement.sql,
            error_type=type(exc).__name__,
        )
        raise QueryError(operation, statement.sql, exc) from exc


def execute_statement(
    connection: Connection, statement: Statement, operation: str, table: str
) -> CursorResult:
    """Run a rendered statement once on ``connection``."""
    log = bind_context(__name__, operation=operation, table=table)
    details: Dict[str, Any] = {"query": statement.sql, "param_count": statement.param_count}
    if get_settings().log_sql_params:
        details["params"] = list(statement.values)
    log.debug("sql.statement_executing", **details)

    parameters = statement.parameters if statement.values else None
    result = connection.exec_driver_sql(statement.sql, parameters)

    log.debug("sql.statement_executed", rowcount=result.rowcount)
    return result
