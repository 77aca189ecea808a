from __future__ import annotations

import typer

from .base import configure_logging
from .commands.select import column_command, row_command, rows_command, value_command

configure_logging()
app = typer.Typer(
    help="Run a query through a typed select helper and print the result",
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("value")(value_command)
app.command("column")(column_command)
app.command("row")(row_command)
app.command("rows")(rows_command)


def main() -> None:
    """Main entry point for package CLI.

    Invokes the Typer application, which handles command parsing and
    execution.

    Side Effects:
        - Processes CLI arguments and executes commands.
        - May exit with non-zero code on errors.
    """
    app()


if __name__ == "__main__":
    main()
