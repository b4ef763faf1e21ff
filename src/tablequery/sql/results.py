"""
Result types returned by the executors.

Every result carries the generated query string first so callers can log or
inspect it. They are NamedTuples, so ``query, rows = select(...)`` works.
"""

from typing import Any, Dict, List, NamedTuple

Row = Dict[str, Any]


class SelectResult(NamedTuple):
    query: str
    rows: List[Row]


class InsertResult(NamedTuple):
    query: str
    rowcount: int


class UpdateResult(NamedTuple):
    query: str
    rowcount: int


class DeleteResult(NamedTuple):
    """``deleted`` is True when at least one row was removed."""

    query: str
    deleted: bool
