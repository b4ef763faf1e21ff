"""
SQL parameter binding utilities.

Renders placeholders and parameter containers for each DBAPI (PEP 249)
paramstyle. Named styles use indexed parameter names (p_0, p_1, ...) so that
column names never leak into bind-parameter names.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from tablequery.config import get_settings

from ..exceptions import QueryBuildError

PARAMSTYLES = ("qmark", "format", "numeric", "named", "pyformat")

BoundParameters = Union[Tuple[Any, ...], Dict[str, Any]]


def param_name(index: int) -> str:
    """Indexed bind-parameter name for named paramstyles."""
    return f"p_{index}"


def validate_paramstyle(paramstyle: str) -> str:
    """Return paramstyle unchanged or raise QueryBuildError if it is unknown."""
    if paramstyle not in PARAMSTYLES:
        raise QueryBuildError(
            f"Unsupported paramstyle {paramstyle!r}; expected one of {', '.join(PARAMSTYLES)}"
        )
    return paramstyle


def placeholder(index: int, paramstyle: str = "qmark") -> str:
    """
    Render the placeholder for the value at a zero-based position.

    Examples:
        >>> placeholder(0)
        '?'
        >>> placeholder(2, "numeric")
        ':3'
        >>> placeholder(1, "pyformat")
        '%(p_1)s'
    """
    validate_paramstyle(paramstyle)
    if paramstyle == "qmark":
        return "?"
    if paramstyle == "format":
        return "%s"
    if paramstyle == "numeric":
        return f":{index + 1}"
    if paramstyle == "named":
        return f":{param_name(index)}"
    return f"%({param_name(index)})s"


def build_placeholders(count: int, start: int, paramstyle: str = "qmark") -> List[str]:
    """
    Build ``count`` consecutive placeholders beginning at position ``start``.

    Examples:
        >>> build_placeholders(2, 0)
        ['?', '?']
        >>> build_placeholders(2, 3, "named")
        [':p_3', ':p_4']
    """
    return [placeholder(start + offset, paramstyle) for offset in range(count)]


def bind_parameters(values: Sequence[Any], paramstyle: str = "qmark") -> BoundParameters:
    """
    Package positional values the way the driver expects for ``paramstyle``.

    Positional styles get a tuple; named styles get a dict keyed by the
    indexed parameter names.

    Examples:
        >>> bind_parameters([1, "a"])
        (1, 'a')
        >>> bind_parameters([1, "a"], "named")
        {'p_0': 1, 'p_1': 'a'}
    """
    validate_paramstyle(paramstyle)
    if paramstyle in ("named", "pyformat"):
        return {param_name(i): value for i, value in enumerate(values)}
    return tuple(values)


def resolve_paramstyle(paramstyle: Optional[str] = None) -> str:
    """Return ``paramstyle`` or the configured default, validated."""
    if paramstyle is None:
        paramstyle = get_settings().default_paramstyle
    return validate_paramstyle(paramstyle)


def escape_literal(text: str, paramstyle: str = "qmark") -> str:
    """
    Escape verbatim SQL text for drivers that %-interpolate the statement.

    Under ``format`` and ``pyformat`` a literal ``%`` must be doubled;
    other paramstyles leave the text unchanged.

    Examples:
        >>> escape_literal("DATE_FORMAT(d, '%Y')", "format")
        "DATE_FORMAT(d, '%%Y')"
        >>> escape_literal("DATE_FORMAT(d, '%Y')", "qmark")
        "DATE_FORMAT(d, '%Y')"
    """
    if paramstyle in ("format", "pyformat"):
        return text.replace("%", "%%")
    return text
