"""Core SQL utilities package."""

from .conditions import (
    Condition,
    Conditions,
    build_assignments,
    build_where_clause,
    normalize_conditions,
)
from .identifier import join_columns, require_identifier
from .parameters import (
    PARAMSTYLES,
    bind_parameters,
    build_placeholders,
    escape_literal,
    placeholder,
    resolve_paramstyle,
    validate_paramstyle,
)
from .rows import decode_row, decode_rows, decode_value
from .statement import Statement

__all__ = [
    "Condition",
    "Conditions",
    "PARAMSTYLES",
    "Statement",
    "bind_parameters",
    "build_assignments",
    "build_placeholders",
    "build_where_clause",
    "escape_literal",
    "decode_row",
    "decode_rows",
    "decode_value",
    "normalize_conditions",
    "join_columns",
    "placeholder",
    "require_identifier",
    "resolve_paramstyle",
    "validate_paramstyle",
]
