"""
Equality condition handling.

Conditions arrive either as a mapping or as a sequence of (column, value)
pairs and are normalized to an ordered tuple of pairs. The rendered clause
and the bound values always follow that order.
"""

from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ..exceptions import QueryBuildError
from .identifier import require_identifier
from .parameters import build_placeholders, escape_literal

Condition = Tuple[str, Any]
Conditions = Union[Mapping[str, Any], Sequence[Condition]]


def normalize_conditions(conditions: Optional[Conditions]) -> Tuple[Condition, ...]:
    """
    Normalize condition input to an ordered tuple of (column, value) pairs.

    Examples:
        >>> normalize_conditions({"id": 1, "name": "a"})
        (('id', 1), ('name', 'a'))
        >>> normalize_conditions([("id", 1)])
        (('id', 1),)
        >>> normalize_conditions(None)
        ()
    """
    if not conditions:
        return ()
    if isinstance(conditions, Mapping):
        items: Iterable[Any] = conditions.items()
    else:
        items = conditions

    pairs: List[Condition] = []
    for item in items:
        if isinstance(item, (str, bytes)) or len(item) != 2:
            raise QueryBuildError(
                f"Conditions must be (column, value) pairs, got: {item!r}"
            )
        column, value = item
        pairs.append((require_identifier(column, "column"), value))
    return tuple(pairs)


def build_assignments(
    columns: Sequence[str], start: int, paramstyle: str = "qmark"
) -> List[str]:
    """
    Render ``column = <placeholder>`` fragments for consecutive positions.

    Examples:
        >>> build_assignments(["a", "b"], 0)
        ['a = ?', 'b = ?']
    """
    placeholders = build_placeholders(len(columns), start, paramstyle)
    return [
        f"{escape_literal(column, paramstyle)} = {ph}"
        for column, ph in zip(columns, placeholders)
    ]


def build_where_clause(
    conditions: Sequence[Condition], start: int = 0, paramstyle: str = "qmark"
) -> Tuple[str, List[Any]]:
    """
    Render a WHERE clause from normalized conditions.

    Args:
        conditions: Ordered (column, value) pairs
        start: Position of the first WHERE value among all bound values
        paramstyle: DBAPI paramstyle for placeholders

    Returns:
        Tuple of (clause, values). The clause is empty when there are no
        conditions; otherwise it starts with a leading space.

    Examples:
        >>> build_where_clause((("id", 1), ("name", "a")))
        (' WHERE id = ? AND name = ?', [1, 'a'])
        >>> build_where_clause(())
        ('', [])
    """
    if not conditions:
        return "", []
    columns = [column for column, _ in conditions]
    values = [value for _, value in conditions]
    fragments = build_assignments(columns, start, paramstyle)
    return " WHERE " + " AND ".join(fragments), values
