"""
SQL INSERT statement builder and executor.

All rows go into one multi-row ``INSERT ... VALUES (...), (...)`` statement.
The column list comes from the first row, and every other row must carry
exactly the same keys.
"""

from typing import Any, List, Mapping, Optional, Sequence

from ..core.identifier import join_columns, require_identifier
from ..core.parameters import build_placeholders, escape_literal, resolve_paramstyle
from ..core.statement import Statement
from ..exceptions import QueryBuildError
from ..execution import (
    Handle,
    connection_scope,
    execute_statement,
    handle_paramstyle,
    statement_errors,
)
from ..results import InsertResult


def _validate_rows(rows: Sequence[Mapping[str, Any]]) -> List[str]:
    """Return the column list, checking every row has the first row's keys."""
    columns = list(rows[0].keys())
    if not columns:
        raise QueryBuildError("Insert rows must contain at least one column")

    expected = set(columns)
    for index, row in enumerate(rows[1:], start=1):
        keys = set(row.keys())
        if keys != expected:
            missing = sorted(expected - keys)
            extra = sorted(keys - expected)
            raise QueryBuildError(
                f"Row {index} columns do not match row 0: "
                f"missing={missing}, unexpected={extra}"
            )
    return columns


def build_insert(
    table: str,
    rows: Sequence[Mapping[str, Any]],
    paramstyle: Optional[str] = None,
) -> Optional[Statement]:
    """
    Build a multi-row INSERT statement.

    Returns None when ``rows`` is empty. Values are bound row by row in the
    first row's column order.

    Example:
        >>> build_insert("users", [{"id": 1, "name": "a"}, {"id": 2, "name": "b"}]).sql
        'INSERT INTO users (id, name) VALUES (?, ?), (?, ?)'
    """
    if not rows:
        return None

    paramstyle = resolve_paramstyle(paramstyle)
    require_identifier(table)
    columns = _validate_rows(rows)

    groups: List[str] = []
    values: List[Any] = []
    for row in rows:
        placeholders = build_placeholders(len(columns), len(values), paramstyle)
        groups.append(f"({', '.join(placeholders)})")
        values.extend(row[column] for column in columns)

    head = escape_literal(f"INSERT INTO {table} ({join_columns(columns)})", paramstyle)
    sql = f"{head} VALUES {', '.join(groups)}"
    return Statement(sql, tuple(values), paramstyle)


def insert(
    handle: Handle,
    table: str,
    rows: Sequence[Mapping[str, Any]],
) -> InsertResult:
    """
    Insert ``rows`` into ``table`` with a single statement.

    An empty ``rows`` sequence is a no-op: the handle is not touched and the
    returned query string is empty.

    Raises:
        QueryBuildError: If rows do not share the same column set
        QueryError: If the driver rejects the statement
    """
    if not rows:
        return InsertResult("", 0)

    statement = build_insert(table, rows, handle_paramstyle(handle))
    with statement_errors("insert", table, statement):
        with connection_scope(handle) as connection:
            result = execute_statement(connection, statement, "insert", table)
            rowcount = result.rowcount
    return InsertResult(statement.sql, rowcount)
