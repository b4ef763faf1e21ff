"""
Exceptions raised by the query builders and executors.

QueryBuildError is raised before any database I/O when the input cannot form
a valid statement. QueryError wraps whatever the driver raised while the
statement was running and keeps the generated SQL for diagnostics.
"""

from typing import Dict, Optional


class QueryBuildError(ValueError):
    """Input cannot be turned into a valid SQL statement."""


class QueryError(Exception):
    """A statement failed while executing or while its results were read."""

    def __init__(
        self,
        operation: str,
        query: str,
        original_error: Exception,
        message: Optional[str] = None,
    ):
        self.operation = operation
        self.query = query
        self.original_error = original_error
        super().__init__(message or str(original_error))

    def __str__(self) -> str:
        return f"{self.operation} failed: {self.args[0]} [query: {self.query}]"

    def to_dict(self) -> Dict[str, str]:
        """Convert to structured dict for logging."""
        return {
            "error_type": "QueryError",
            "operation": self.operation,
            "query": self.query,
            "message": str(self.args[0]),
            "original_error_type": type(self.original_error).__name__,
            "original_error_message": str(self.original_error),
        }
