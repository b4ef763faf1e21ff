"""DELETE statement builder and executor."""

from typing import Optional

from ..core.conditions import Conditions, build_where_clause, normalize_conditions
from ..core.identifier import require_identifier
from ..core.parameters import escape_literal, resolve_paramstyle
from ..core.statement import Statement
from ..execution import (
    Handle,
    connection_scope,
    execute_statement,
    handle_paramstyle,
    statement_errors,
)
from ..results import DeleteResult


def build_delete(
    table: str,
    where: Optional[Conditions] = None,
    paramstyle: Optional[str] = None,
) -> Statement:
    """
    Build ``DELETE FROM <table> [WHERE c = ? AND ...]``.

    Without conditions the statement removes every row.
    """
    paramstyle = resolve_paramstyle(paramstyle)
    require_identifier(table)
    where_sql, values = build_where_clause(normalize_conditions(where), 0, paramstyle)
    table_sql = escape_literal(table, paramstyle)
    return Statement(f"DELETE FROM {table_sql}{where_sql}", tuple(values), paramstyle)


def delete(
    handle: Handle,
    table: str,
    where: Optional[Conditions] = None,
) -> DeleteResult:
    """
    Delete matching rows; ``deleted`` reports whether any row was removed.

    Raises:
        QueryError: If the driver rejects the statement
    """
    statement = build_delete(table, where, handle_paramstyle(handle))
    with statement_errors("delete", table, statement):
        with connection_scope(handle) as connection:
            result = execute_statement(connection, statement, "delete", table)
            deleted = result.rowcount > 0
    return DeleteResult(statement.sql, deleted)
