"""CLI commands that run a query through one of the typed select helpers."""

from __future__ import annotations

import contextlib
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import typer

from ...database import (
    VALUE_CONVERTERS,
    get_connection,
    select_column,
    select_map,
    select_map_column,
    select_one,
    select_string_map,
    select_string_map_column,
)
from ..base import BaseCLI, format_value, render_mapping, render_rows


class ValueType(str, Enum):
    VALUE = "value"
    STRING = "string"
    BYTES = "bytes"
    INT = "int"
    FLOAT = "float"
    DECIMAL = "decimal"
    UUID = "uuid"
    BOOL = "bool"


SqlArg = Annotated[str, typer.Argument(help="SQL statement to run")]
DbPathOption = Annotated[
    Path | None,
    typer.Option(
        "--db-path",
        help="Path to SQLite database file (defaults to global config)",
    ),
]
ParamOption = Annotated[
    list[str] | None,
    typer.Option(
        "--param",
        "-p",
        help="Positional query parameter; repeat for each '?' placeholder",
    ),
]
AsOption = Annotated[
    ValueType,
    typer.Option("--as", help="Python type to coerce the value(s) to"),
]
StringsOption = Annotated[
    bool,
    typer.Option("--strings", help="Render every value through the string conversion"),
]


class SelectCLI(BaseCLI):
    """Runs a select helper against a SQLite database and prints the result."""

    def __init__(self) -> None:
        super().__init__("select")

    def run(
        self,
        *,
        operation: str,
        db_path: Path | None,
        query: Callable[[Any], Any],
        render: Callable[[Any], Any] = format_value,
    ) -> Any:
        def _op() -> Any:
            with contextlib.closing(get_connection(db_path=db_path)) as conn:
                return query(conn)

        return self.handle_cli_operation(operation=operation, op_callable=_op, render=render)


cli = SelectCLI()


def _render_column(values: list[Any]) -> str:
    return "\n".join(format_value(value) for value in values)


def value_command(
    sql: SqlArg,
    as_type: AsOption = ValueType.VALUE,
    params: ParamOption = None,
    db_path: DbPathOption = None,
) -> None:
    """Print the single value returned by SQL.

    Fails unless the query returns exactly one row with one column.
    """
    convert = VALUE_CONVERTERS[as_type.value]
    cli.run(
        operation="select value",
        db_path=db_path,
        query=lambda conn: select_one(conn, sql, params, convert),
    )


def column_command(
    sql: SqlArg,
    as_type: AsOption = ValueType.VALUE,
    params: ParamOption = None,
    db_path: DbPathOption = None,
) -> None:
    """Print every value of a single-column query, one per line."""
    convert = VALUE_CONVERTERS[as_type.value]
    cli.run(
        operation="select column",
        db_path=db_path,
        query=lambda conn: select_column(conn, sql, params, convert),
        render=_render_column,
    )


def row_command(
    sql: SqlArg,
    strings: StringsOption = False,
    params: ParamOption = None,
    db_path: DbPathOption = None,
) -> None:
    """Print the single row returned by SQL as a column/value table."""
    helper = select_string_map if strings else select_map
    cli.run(
        operation="select row",
        db_path=db_path,
        query=lambda conn: helper(conn, sql, params),
        render=render_mapping,
    )


def rows_command(
    sql: SqlArg,
    strings: StringsOption = False,
    params: ParamOption = None,
    db_path: DbPathOption = None,
) -> None:
    """Print every row returned by SQL as a table."""
    helper = select_string_map_column if strings else select_map_column
    cli.run(
        operation="select rows",
        db_path=db_path,
        query=lambda conn: helper(conn, sql, params),
        render=render_rows,
    )
