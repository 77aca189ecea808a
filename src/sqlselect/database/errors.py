"""Database-specific exception types for the project.

Shape errors are raised locally when a result does not have the row or
column count a helper requires. Errors raised by the underlying driver
(SQL errors, connection failures) are never wrapped and reach the caller
unchanged.
"""

from __future__ import annotations

from typing import Any


class DatabaseError(Exception):
    """Base exception for errors raised by this package."""


class ResultShapeError(DatabaseError):
    """Raised when a result set has the wrong number of rows or columns."""

    message = "unexpected result shape"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class NoRowsError(ResultShapeError):
    """Raised when exactly one row was required and none came back."""

    message = "no rows in result set"


class MultipleRowsError(ResultShapeError):
    """Raised when exactly one row was required and more came back."""

    message = "multiple rows in result set"


class NoColumnsError(ResultShapeError):
    """Raised when the statement produced no columns."""

    message = "no columns in result set"


class MultipleColumnsError(ResultShapeError):
    """Raised when exactly one column was required and more came back."""

    message = "multiple columns in result set"


class ConversionError(DatabaseError):
    """Raised when a column value cannot be coerced to the requested type."""

    def __init__(self, value: Any, target: str, reason: str | None = None) -> None:
        self.value = value
        self.target = target
        source = "NULL" if value is None else type(value).__name__
        msg = f"cannot convert {source} to {target}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
