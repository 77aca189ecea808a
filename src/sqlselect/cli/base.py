from __future__ import annotations

import logging
from collections.abc import Callable, Generator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

_LOGGING_CONFIGURED = False

console = Console(highlight=False, markup=False, soft_wrap=True)


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure CLI-wide logging once.

    Safe to call multiple times; only configures on first call. Query
    results go to stdout, so the default level keeps DEBUG/INFO noise
    out of the way.

    Args:
        level: Logging level (defaults to WARNING).

    Side Effects:
        - Configures Python logging module globally.
        - Sets module-level flag to prevent reconfiguration.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    _LOGGING_CONFIGURED = True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger hooked into the shared CLI configuration."""
    return logging.getLogger(name)


@contextmanager
def handle_errors(
    operation: str,
    *,
    logger: logging.Logger | None = None,
) -> Generator[None, None, None]:
    """Provide consistent exception handling for CLI operations.

    Context manager that catches exceptions, logs them, displays a short
    error message, and exits with code 1. Re-raises typer.Exit to allow
    normal CLI exit flow.

    Args:
        operation: Human-readable operation name for error messages.
        logger: Logger instance. Defaults to module logger if None.

    Raises:
        typer.Exit: Always exits with code 1 on exception (except typer.Exit
            which is re-raised).

    Logs:
        - ERROR: "Error during {operation}" with full exception traceback.

    User Output:
        - Prints error message via typer.secho() in red: "✗ {operation} failed: {exc}".
    """
    logger = logger or get_logger(__name__)
    try:
        yield
    except typer.Exit:
        raise
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error during %s", operation)
        typer.secho(f"✗ {operation} failed: {exc}", fg=typer.colors.RED)
        raise typer.Exit(1) from exc


def format_value(value: Any) -> str:
    """Render a single column value for terminal output.

    NULL prints as ``NULL`` and binary values in ``\\x`` hex notation.
    """
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray, memoryview)):
        return "\\x" + bytes(value).hex()
    return str(value)


def render_mapping(row: Mapping[str, Any]) -> Table:
    """Render one row as a column/value table."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("column")
    table.add_column("value")
    for name, value in row.items():
        table.add_row(name, format_value(value))
    return table


def render_rows(rows: Sequence[Mapping[str, Any]]) -> Table:
    """Render mapping rows as a table with one line per row."""
    table = Table(show_header=True, header_style="bold")
    columns: list[str] = []
    for row in rows:
        for name in row:
            if name not in columns:
                columns.append(name)
    for name in columns:
        table.add_column(name)
    for row in rows:
        table.add_row(*(format_value(row.get(name)) for name in columns))
    return table


class BaseCLI:
    """Utility base class for CLI command groups."""

    def __init__(self, domain: str) -> None:
        self.domain = domain
        self.logger = get_logger(__name__)

    def handle_cli_operation(
        self,
        *,
        operation: str,
        op_callable: Callable[[], Any],
        render: Callable[[Any], Any] = format_value,
    ) -> Any:
        """Run an operation with consistent logging, rendering, and errors.

        Args:
            operation: Human-readable operation name for error handling.
            op_callable: Callable that performs the operation and returns
                a result.
            render: Turns the result into something printable by rich
                (a string or a renderable such as a Table).

        Returns:
            Result from op_callable.

        User Output:
            - Prints the rendered result via the shared rich console.
            - Error messages handled by handle_errors context manager.
        """
        with handle_errors(operation, logger=self.logger):
            result = op_callable()

        console.print(render(result))
        return result
