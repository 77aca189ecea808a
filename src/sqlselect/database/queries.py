"""Basic query execution and result-shape helpers.

These wrap low-level DB-API operations with logging and check the row
and column counts that the typed select helpers rely on. Any object
with a ``cursor()`` method returning a PEP 249 cursor can be passed as
``conn``: a ``sqlite3.Connection``, a psycopg connection, and so on.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

from .errors import MultipleColumnsError, MultipleRowsError, NoColumnsError, NoRowsError

logger = logging.getLogger(__name__)

Params = Sequence[Any] | Mapping[str, Any] | None


class Cursor(Protocol):
    description: Any

    def execute(self, sql: str, params: Any = ..., /) -> Any: ...

    def fetchall(self) -> list[Any]: ...

    def fetchmany(self, size: int = ..., /) -> list[Any]: ...

    def close(self) -> None: ...


class Connection(Protocol):
    def cursor(self) -> Cursor: ...


@dataclass(frozen=True)
class Result:
    """Column labels and rows read from a single statement."""

    columns: tuple[str, ...]
    rows: list[tuple[Any, ...]] = field(default_factory=list)


def execute_query(conn: Connection, sql: str, params: Params = None) -> Cursor:
    """Execute a SQL statement on a new cursor and return the cursor.

    Args:
        conn: DB-API connection.
        sql: SQL query string.
        params: Query parameters (sequence or mapping). Defaults to empty tuple.

    Returns:
        Cursor positioned before the first result row. The caller owns it.

    Raises:
        Whatever the driver raises if execution fails; the error is logged
        and re-raised unchanged.

    Logs:
        - DEBUG: "Executed query: {sql[:80]}" on success.
        - ERROR: "Query execution failed: {exc}" with exception details on failure.
    """
    cursor = conn.cursor()
    try:
        cursor.execute(sql, params if params is not None else ())
    except Exception as exc:
        logger.exception("Query execution failed: %s", exc)
        cursor.close()
        raise
    logger.debug("Executed query: %s", sql[:80])
    return cursor


def fetch_result(
    conn: Connection,
    sql: str,
    params: Params = None,
    *,
    limit: int | None = None,
) -> Result:
    """Execute a statement and read its columns and rows.

    A statement without a result set (``cursor.description is None``)
    yields no columns and no rows.

    Args:
        conn: DB-API connection.
        sql: SQL query string.
        params: Query parameters (sequence or mapping).
        limit: Maximum number of rows to fetch. Fetches everything when None.

    Returns:
        Result with column labels and fetched rows as tuples.
    """
    with contextlib.closing(execute_query(conn, sql, params)) as cursor:
        description = cursor.description
        if description is None:
            return Result(columns=())
        columns = tuple(col[0] for col in description)
        raw = cursor.fetchall() if limit is None else cursor.fetchmany(limit)
    rows = [tuple(row) for row in raw]
    logger.debug("Fetched %d row(s) x %d column(s)", len(rows), len(columns))
    return Result(columns=columns, rows=rows)


def one_value(result: Result) -> Any:
    """Return the only value of a one-row, one-column result.

    Checks run in a fixed order, so a result that is wrong in several
    ways always reports the same error.

    Raises:
        NoColumnsError: If the statement produced no columns.
        NoRowsError: If the result has no rows.
        MultipleColumnsError: If the result has more than one column.
        MultipleRowsError: If the result has more than one row.
    """
    if not result.columns:
        raise NoColumnsError()
    if not result.rows:
        raise NoRowsError()
    if len(result.columns) > 1:
        raise MultipleColumnsError()
    if len(result.rows) > 1:
        raise MultipleRowsError()
    return result.rows[0][0]


def one_row(result: Result) -> tuple[Any, ...]:
    """Return the only row of a result with any number of columns.

    Raises:
        NoColumnsError: If the statement produced no columns.
        NoRowsError: If the result has no rows.
        MultipleRowsError: If the result has more than one row.
    """
    if not result.columns:
        raise NoColumnsError()
    if not result.rows:
        raise NoRowsError()
    if len(result.rows) > 1:
        raise MultipleRowsError()
    return result.rows[0]


def one_column(result: Result) -> list[Any]:
    """Return the values of a single-column result, one per row.

    Raises:
        NoColumnsError: If the result has no columns.
        MultipleColumnsError: If the result has more than one column.
    """
    _require_one_column(result)
    return [row[0] for row in result.rows]


def _require_one_column(result: Result) -> None:
    if not result.columns:
        raise NoColumnsError()
    if len(result.columns) > 1:
        raise MultipleColumnsError()
