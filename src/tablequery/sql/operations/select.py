"""SELECT statement builder and executor."""

from contextlib import closing
from typing import Optional, Sequence

from ..core.conditions import Conditions, build_where_clause, normalize_conditions
from ..core.identifier import join_columns, require_identifier
from ..core.parameters import escape_literal, resolve_paramstyle
from ..core.rows import decode_rows
from ..core.statement import Statement
from ..execution import (
    Handle,
    connection_scope,
    execute_statement,
    handle_paramstyle,
    statement_errors,
)
from ..results import SelectResult


def build_select(
    table: str,
    columns: Sequence[str],
    where: Optional[Conditions] = None,
    paramstyle: Optional[str] = None,
) -> Statement:
    """
    Build ``SELECT <columns> FROM <table> [WHERE c = ? AND ...]``.

    Column names are inserted verbatim; pass ``["*"]`` for every column.

    Example:
        >>> build_select("users", ["id", "name"], {"id": 7}).sql
        'SELECT id, name FROM users WHERE id = ?'
    """
    paramstyle = resolve_paramstyle(paramstyle)
    require_identifier(table)
    conditions = normalize_conditions(where)

    sql = escape_literal(f"SELECT {join_columns(columns)} FROM {table}", paramstyle)
    where_sql, values = build_where_clause(conditions, 0, paramstyle)
    return Statement(sql + where_sql, tuple(values), paramstyle)


def select(
    handle: Handle,
    table: str,
    columns: Sequence[str],
    where: Optional[Conditions] = None,
) -> SelectResult:
    """
    Run a SELECT and return the query string with the decoded rows.

    Binary values are decoded to text. Rows keep database order.

    Raises:
        QueryBuildError: If the table or column list is empty
        QueryError: If the driver fails to execute or fetch
    """
    statement = build_select(table, columns, where, handle_paramstyle(handle))
    with statement_errors("select", table, statement):
        with connection_scope(handle) as connection:
            result = execute_statement(connection, statement, "select", table)
            with closing(result):
                names = list(result.keys())
                rows = decode_rows(names, result)
    return SelectResult(statement.sql, rows)
