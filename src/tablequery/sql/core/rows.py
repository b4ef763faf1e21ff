"""
Row decoding utilities.

Converts driver result rows into plain dictionaries. Binary column values are
decoded to text; everything else passes through untouched.
"""

from typing import Any, Dict, Iterable, List, Sequence

BINARY_TYPES = (bytes, bytearray, memoryview)


def decode_value(value: Any) -> Any:
    """
    Decode binary values to str (UTF-8, undecodable bytes replaced).

    Examples:
        >>> decode_value(b"abc")
        'abc'
        >>> decode_value(42)
        42
    """
    if isinstance(value, BINARY_TYPES):
        return bytes(value).decode("utf-8", errors="replace")
    return value


def decode_row(columns: Sequence[str], row: Iterable[Any]) -> Dict[str, Any]:
    """
    Build a row mapping from column names and a result row.

    Examples:
        >>> decode_row(["id", "name"], (1, b"alice"))
        {'id': 1, 'name': 'alice'}
    """
    return {name: decode_value(value) for name, value in zip(columns, row)}


def decode_rows(columns: Sequence[str], rows: Iterable[Iterable[Any]]) -> List[Dict[str, Any]]:
    """Decode every row, preserving the order the database returned them in."""
    return [decode_row(columns, row) for row in rows]
