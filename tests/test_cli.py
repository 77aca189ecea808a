"""Tests for the sqlselect CLI."""

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest
from typer.testing import CliRunner

from sqlselect.cli.base import format_value
from sqlselect.cli.main import app

runner = CliRunner()


@pytest.fixture
def cli_db(sqlite_path: Path) -> Path:
    conn = sqlite3.connect(sqlite_path)
    try:
        conn.executescript(
            """
            CREATE TABLE people (name TEXT NOT NULL, height INTEGER);
            INSERT INTO people VALUES ('Adam', 72);
            INSERT INTO people VALUES ('Bea', NULL);
            """
        )
        conn.commit()
    finally:
        conn.close()
    return sqlite_path


def _invoke(db_path: Path, *args: str):
    return runner.invoke(app, [*args, "--db-path", str(db_path)])


@pytest.mark.integration
class TestValueCommand:
    def test_prints_value(self, cli_db: Path) -> None:
        result = _invoke(cli_db, "value", "SELECT height FROM people WHERE name = 'Adam'")
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "72"

    def test_null_prints_as_null(self, cli_db: Path) -> None:
        result = _invoke(cli_db, "value", "SELECT height FROM people WHERE name = 'Bea'")
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "NULL"

    def test_as_bytes(self, cli_db: Path) -> None:
        result = _invoke(cli_db, "value", "SELECT 42", "--as", "bytes")
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "\\x0000002a"

    def test_as_bool_prints_lowercase(self, cli_db: Path) -> None:
        result = _invoke(cli_db, "value", "SELECT 1 = 1", "--as", "bool")
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "true"

    def test_as_decimal(self, cli_db: Path) -> None:
        result = _invoke(cli_db, "value", "SELECT 1.2345", "--as", "decimal")
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "1.2345"

    def test_parameters(self, cli_db: Path) -> None:
        result = _invoke(
            cli_db, "value", "SELECT height FROM people WHERE name = ?", "-p", "Adam", "--as", "int"
        )
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "72"

    def test_shape_error_exits_nonzero(self, cli_db: Path) -> None:
        result = _invoke(cli_db, "value", "SELECT name FROM people")
        assert result.exit_code == 1
        assert "select value failed: multiple rows in result set" in result.output

    def test_conversion_error_exits_nonzero(self, cli_db: Path) -> None:
        result = _invoke(cli_db, "value", "SELECT 'abc'", "--as", "int")
        assert result.exit_code == 1
        assert "cannot convert str to int" in result.output

    def test_sql_error_exits_nonzero(self, cli_db: Path) -> None:
        result = _invoke(cli_db, "value", "SELECT * FROM nope")
        assert result.exit_code == 1
        assert "no such table: nope" in result.output

    def test_rejects_unknown_type(self, cli_db: Path) -> None:
        result = _invoke(cli_db, "value", "SELECT 1", "--as", "complex")
        assert result.exit_code != 0


@pytest.mark.integration
class TestColumnCommand:
    def test_prints_one_value_per_line(self, cli_db: Path) -> None:
        result = _invoke(cli_db, "column", "SELECT name FROM people ORDER BY name")
        assert result.exit_code == 0, result.output
        assert result.output.split() == ["Adam", "Bea"]

    def test_multiple_columns_fail(self, cli_db: Path) -> None:
        result = _invoke(cli_db, "column", "SELECT name, height FROM people")
        assert result.exit_code == 1
        assert "multiple columns in result set" in result.output


@pytest.mark.integration
class TestRowCommands:
    def test_row_renders_columns_and_values(self, cli_db: Path) -> None:
        result = _invoke(cli_db, "row", "SELECT name, height FROM people WHERE name = 'Adam'")
        assert result.exit_code == 0, result.output
        for text in ("name", "height", "Adam", "72"):
            assert text in result.output

    def test_row_strings_rejects_null(self, cli_db: Path) -> None:
        result = _invoke(
            cli_db, "row", "SELECT name, height FROM people WHERE name = 'Bea'", "--strings"
        )
        assert result.exit_code == 1
        assert "cannot convert NULL to str" in result.output

    def test_row_without_match_fails(self, cli_db: Path) -> None:
        result = _invoke(cli_db, "row", "SELECT * FROM people WHERE name = 'Zed'")
        assert result.exit_code == 1
        assert "no rows in result set" in result.output

    def test_rows_renders_every_row(self, cli_db: Path) -> None:
        result = _invoke(cli_db, "rows", "SELECT name, height FROM people ORDER BY name")
        assert result.exit_code == 0, result.output
        for text in ("name", "height", "Adam", "72", "Bea", "NULL"):
            assert text in result.output


@pytest.mark.unit
def test_format_value_renders_booleans_like_to_string() -> None:
    assert format_value(True) == "true"
    assert format_value(False) == "false"
    assert format_value(None) == "NULL"
    assert format_value(b"\x00*") == "\\x002a"
