"""SQL statement value object."""

from dataclasses import dataclass, field
from typing import Any, Tuple

from .parameters import BoundParameters, bind_parameters


@dataclass(frozen=True)
class Statement:
    """
    A rendered SQL statement and its ordered bind values.

    Attributes:
        sql: SQL text with placeholders in ``paramstyle``
        values: Bind values in placeholder order
        paramstyle: DBAPI paramstyle the placeholders were rendered in
    """

    sql: str
    values: Tuple[Any, ...] = field(default_factory=tuple)
    paramstyle: str = "qmark"

    @property
    def param_count(self) -> int:
        return len(self.values)

    @property
    def parameters(self) -> BoundParameters:
        """Bind values packaged for the driver (tuple or dict)."""
        return bind_parameters(self.values, self.paramstyle)

    def __str__(self) -> str:
        return self.sql
