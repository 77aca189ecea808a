"""
sqlselect core package.

Typed query helpers over any DB-API 2.0 connection:
- Single-value, single-row and single-column selects (`sqlselect.database`)
- Value coercion from driver types to native Python types
- A minimal Typer-based CLI for ad hoc queries (`sqlselect.cli`)

Configuration:
- Shared, project-wide filesystem anchors live in `sqlselect.global_config`.
"""

from .database import (
    ConversionError,
    DatabaseError,
    MultipleColumnsError,
    MultipleRowsError,
    NoColumnsError,
    NoRowsError,
    ResultShapeError,
    select_bool,
    select_bool_column,
    select_bytes,
    select_bytes_column,
    select_decimal,
    select_decimal_column,
    select_float,
    select_float_column,
    select_int,
    select_int_column,
    select_map,
    select_map_column,
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
    "ConversionError",
    "DatabaseError",
    "MultipleColumnsError",
    "MultipleRowsError",
    "NoColumnsError",
    "NoRowsError",
    "ResultShapeError",
    "select_bool",
    "select_bool_column",
    "select_bytes",
    "select_bytes_column",
    "select_decimal",
    "select_decimal_column",
    "select_float",
    "select_float_column",
    "select_int",
    "select_int_column",
    "select_map",
    "select_map_column",
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
