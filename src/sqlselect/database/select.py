"""Typed single-value, single-row and single-column select helpers.

Every helper takes a DB-API connection, a SQL string and optional
parameters. Single-value helpers require exactly one row and one column,
row helpers exactly one row, and column helpers exactly one column with
any number of rows. Shape mismatches raise the ResultShapeError family;
driver errors propagate unchanged.

Example:
    with transaction() as conn:
        count = select_int(conn, "SELECT count(*) FROM tracks WHERE album_id = ?", (7,))
        names = select_string_column(conn, "SELECT name FROM tracks ORDER BY name")
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from decimal import Decimal
from typing import Any, TypeVar

from . import decode
from .queries import Connection, Params, Result, fetch_result, one_column, one_row, one_value

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Two rows are enough to tell "one" from "many".
_SINGLE_ROW_LIMIT = 2


def _identity(value: Any) -> Any:
    return value


VALUE_CONVERTERS: dict[str, Callable[[Any], Any]] = {
    "value": _identity,
    "string": decode.to_string,
    "bytes": decode.to_bytes,
    "int": decode.to_int,
    "float": decode.to_float,
    "decimal": decode.to_decimal,
    "uuid": decode.to_uuid,
    "bool": decode.to_bool,
}


def select_one(conn: Connection, sql: str, params: Params, convert: Callable[[Any], T]) -> T:
    """Return the single value of a query passed through convert."""
    result = fetch_result(conn, sql, params, limit=_SINGLE_ROW_LIMIT)
    return convert(one_value(result))


def select_column(
    conn: Connection, sql: str, params: Params, convert: Callable[[Any], T]
) -> list[T]:
    """Return every value of a single-column query passed through convert."""
    result = fetch_result(conn, sql, params)
    return [convert(value) for value in one_column(result)]


def _as_map(result: Result, row: tuple[Any, ...], convert: Callable[[Any], T]) -> dict[str, T]:
    # Repeated labels keep the last value.
    return {name: convert(value) for name, value in zip(result.columns, row)}


def select_value(conn: Connection, sql: str, params: Params = None) -> Any:
    """Return the single value of a query exactly as the driver decoded it.

    SQL NULL comes back as None.

    Raises:
        NoRowsError, MultipleRowsError, NoColumnsError, MultipleColumnsError:
            If the result is not exactly one row with one column.
    """
    return select_one(conn, sql, params, _identity)


def select_value_column(conn: Connection, sql: str, params: Params = None) -> list[Any]:
    """Return every value of a single-column query as decoded by the driver."""
    return select_column(conn, sql, params, _identity)


def select_string(conn: Connection, sql: str, params: Params = None) -> str:
    """Return the single value of a query as text.

    Non-text values are rendered (``42`` -> ``"42"``); binary values are
    decoded as UTF-8.

    Raises:
        ResultShapeError: If the result is not exactly one row with one column.
        ConversionError: If the value is NULL or has no text form.
    """
    return select_one(conn, sql, params, decode.to_string)


def select_string_column(conn: Connection, sql: str, params: Params = None) -> list[str]:
    return select_column(conn, sql, params, decode.to_string)


def select_bytes(conn: Connection, sql: str, params: Params = None) -> bytes:
    """Return the single value of a query as bytes.

    Text is encoded as UTF-8 and integers in big-endian binary form, so
    ``SELECT 42`` yields ``b"\\x00\\x00\\x00*"``.
    """
    return select_one(conn, sql, params, decode.to_bytes)


def select_bytes_column(conn: Connection, sql: str, params: Params = None) -> list[bytes]:
    return select_column(conn, sql, params, decode.to_bytes)


def select_int(conn: Connection, sql: str, params: Params = None) -> int:
    """Return the single value of a query as an integer.

    Floating point and decimal values are accepted only when integral.
    """
    return select_one(conn, sql, params, decode.to_int)


def select_int_column(conn: Connection, sql: str, params: Params = None) -> list[int]:
    return select_column(conn, sql, params, decode.to_int)


def select_float(conn: Connection, sql: str, params: Params = None) -> float:
    return select_one(conn, sql, params, decode.to_float)


def select_float_column(conn: Connection, sql: str, params: Params = None) -> list[float]:
    return select_column(conn, sql, params, decode.to_float)


def select_decimal(conn: Connection, sql: str, params: Params = None) -> Decimal:
    """Return the single value of a query as a Decimal.

    Doubles convert through their shortest repr, so a stored ``1.2345``
    comes back as ``Decimal("1.2345")``.
    """
    return select_one(conn, sql, params, decode.to_decimal)


def select_decimal_column(conn: Connection, sql: str, params: Params = None) -> list[Decimal]:
    return select_column(conn, sql, params, decode.to_decimal)


def select_uuid(conn: Connection, sql: str, params: Params = None) -> uuid.UUID:
    """Return the single value of a query as a UUID.

    Accepts native UUID values, any text form ``uuid.UUID`` parses, and
    16-byte binary values.
    """
    return select_one(conn, sql, params, decode.to_uuid)


def select_uuid_column(conn: Connection, sql: str, params: Params = None) -> list[uuid.UUID]:
    return select_column(conn, sql, params, decode.to_uuid)


def select_bool(conn: Connection, sql: str, params: Params = None) -> bool:
    return select_one(conn, sql, params, decode.to_bool)


def select_bool_column(conn: Connection, sql: str, params: Params = None) -> list[bool]:
    return select_column(conn, sql, params, decode.to_bool)


def select_row(conn: Connection, sql: str, params: Params = None) -> tuple[Any, ...]:
    """Return the single row of a query as a tuple of driver values.

    Raises:
        NoRowsError: If the query returned no rows.
        MultipleRowsError: If the query returned more than one row.
        NoColumnsError: If the statement produced no columns.
    """
    result = fetch_result(conn, sql, params, limit=_SINGLE_ROW_LIMIT)
    return one_row(result)


def select_map(conn: Connection, sql: str, params: Params = None) -> dict[str, Any]:
    """Return the single row of a query as a column label -> value mapping.

    Example:
        select_map(conn, "SELECT 'Adam' AS name, 72 AS height")
        # {"name": "Adam", "height": 72}
    """
    result = fetch_result(conn, sql, params, limit=_SINGLE_ROW_LIMIT)
    return _as_map(result, one_row(result), _identity)


def select_map_column(conn: Connection, sql: str, params: Params = None) -> list[dict[str, Any]]:
    """Return every row of a query as a column label -> value mapping.

    An empty result yields an empty list.
    """
    result = fetch_result(conn, sql, params)
    return [_as_map(result, row, _identity) for row in result.rows]


def select_string_map(conn: Connection, sql: str, params: Params = None) -> dict[str, str]:
    """Return the single row of a query as a mapping of column label -> text.

    Raises:
        ResultShapeError: If the result is not exactly one row.
        ConversionError: If any value is NULL or has no text form.
    """
    result = fetch_result(conn, sql, params, limit=_SINGLE_ROW_LIMIT)
    return _as_map(result, one_row(result), decode.to_string)


def select_string_map_column(
    conn: Connection, sql: str, params: Params = None
) -> list[dict[str, str]]:
    result = fetch_result(conn, sql, params)
    return [_as_map(result, row, decode.to_string) for row in result.rows]
