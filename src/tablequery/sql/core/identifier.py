"""
SQL identifier handling utilities.

Table and column names are caller-trusted and inserted verbatim; these
helpers only reject input that cannot produce a statement at all.
"""

from typing import List, Sequence

from ..exceptions import QueryBuildError


def require_identifier(name: str, kind: str = "table") -> str:
    """
    Return ``name`` unchanged, or raise QueryBuildError if it is blank.

    Examples:
        >>> require_identifier("users")
        'users'
    """
    if not isinstance(name, str) or not name.strip():
        raise QueryBuildError(f"A non-empty {kind} name is required, got: {name!r}")
    return name


def join_columns(columns: Sequence[str]) -> str:
    """
    Join column names for a SELECT list or INSERT column list.

    Examples:
        >>> join_columns(["id", "name"])
        'id, name'
    """
    if isinstance(columns, str):
        columns = [columns]
    names: List[str] = [require_identifier(column, "column") for column in columns]
    if not names:
        raise QueryBuildError("At least one column is required")
    return ", ".join(names)
