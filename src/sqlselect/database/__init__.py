"""Public interface for the database package.

This module exposes the main primitives needed by the rest of the
project: connection helpers, the typed select helpers, and the error
types they raise.
"""

from .connection import get_connection, transaction
from .errors import (
    ConversionError,
    DatabaseError,
    MultipleColumnsError,
    MultipleRowsError,
    NoColumnsError,
    NoRowsError,
    ResultShapeError,
)
from .select import (
    VALUE_CONVERTERS,
    select_bool,
    select_bool_column,
    select_bytes,
    select_bytes_column,
    select_column,
    select_decimal,
    select_decimal_column,
    select_float,
    select_float_column,
    select_int,
    select_int_column,
    select_map,
    select_map_column,
    select_one,
    select_row,
    select_string,
    select_string_column,
    select_string_map,
    select_string_map_column,
    select_uuid,
    select_uuid_column,
    select_value,
    select_value_column,
)

__all__ = [
    "get_connection",
    "transaction",
    "ConversionError",
    "DatabaseError",
    "MultipleColumnsError",
    "MultipleRowsError",
    "NoColumnsError",
    "NoRowsError",
    "ResultShapeError",
    "VALUE_CONVERTERS",
    "select_bool",
    "select_bool_column",
    "select_bytes",
    "select_bytes_column",
    "select_column",
    "select_decimal",
    "select_decimal_column",
    "select_float",
    "select_float_column",
    "select_int",
    "select_int_column",
    "select_map",
    "select_map_column",
    "select_one",
    "select_row",
    "select_string",
    "select_string_column",
    "select_string_map",
    "select_string_map_column",
    "select_uuid",
    "select_uuid_column",
    "select_value",
    "select_value_column",
]
