"""UPDATE statement builder and executor."""

from typing import Any, Mapping, Optional

from ..core.conditions import (
    Conditions,
    build_assignments,
    build_where_clause,
    normalize_conditions,
)
from ..core.identifier import require_identifier
from ..core.parameters import escape_literal, resolve_paramstyle
from ..core.statement import Statement
from ..exceptions import QueryBuildError
from ..execution import (
    Handle,
    connection_scope,
    execute_statement,
    handle_paramstyle,
    statement_errors,
)
from ..results import UpdateResult


def build_update(
    table: str,
    data: Mapping[str, Any],
    where: Conditions,
    paramstyle: Optional[str] = None,
) -> Statement:
    """
    Build ``UPDATE <table> SET a = ?, b = ? WHERE c = ? AND ...``.

    SET values are bound before WHERE values. Both ``data`` and ``where``
    must be non-empty; unfiltered updates are refused.

    Example:
        >>> stmt = build_update("users", {"name": "b"}, {"id": 1})
        >>> stmt.sql, stmt.values
        ('UPDATE users SET name = ? WHERE id = ?', ('b', 1))
    """
    paramstyle = resolve_paramstyle(paramstyle)
    require_identifier(table)
    assignments = normalize_conditions(data)
    conditions = normalize_conditions(where)
    if not assignments:
        raise QueryBuildError("Update requires at least one column to set")
    if not conditions:
        raise QueryBuildError("Update requires at least one WHERE condition")

    set_columns = [column for column, _ in assignments]
    set_sql = ", ".join(build_assignments(set_columns, 0, paramstyle))
    where_sql, where_values = build_where_clause(
        conditions, len(assignments), paramstyle
    )

    values = [value for _, value in assignments] + where_values
    table_sql = escape_literal(table, paramstyle)
    return Statement(f"UPDATE {table_sql} SET {set_sql}{where_sql}", tuple(values), paramstyle)


def update(
    handle: Handle,
    table: str,
    data: Mapping[str, Any],
    where: Conditions,
) -> UpdateResult:
    """
    Update rows matching every condition in ``where``.

    Raises:
        QueryBuildError: If ``data`` or ``where`` is empty
        QueryError: If the driver rejects the statement
    """
    statement = build_update(table, data, where, handle_paramstyle(handle))
    with statement_errors("update", table, statement):
        with connection_scope(handle) as connection:
            result = execute_statement(connection, statement, "update", table)
            rowcount = result.rowcount
    return UpdateResult(statement.sql, rowcount)
