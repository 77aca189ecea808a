"""Database connection helpers.

This module provides a small, synchronous API for obtaining SQLite
connections. The select helpers themselves accept any DB-API 2.0
connection; these are the defaults used by the CLI and the tests.
"""

from __future__ import annotations

import contextlib
import logging
import sqlite3
from collections.abc import Iterator
from pathlib import Path

from .. import global_config as g

logger = logging.getLogger(__name__)


def _configure_connection(conn: sqlite3.Connection) -> None:
    """Apply standard pragmas to a new connection.

    Rows are left as plain tuples: the select helpers read column labels
    from ``cursor.description`` so they work the same on every driver.

    Args:
        conn: SQLite connection to configure.
    """
    conn.execute("PRAGMA foreign_keys = ON")


def get_connection(db_path: Path | str | None = None) -> sqlite3.Connection:
    """Return a configured SQLite connection.

    Args:
        db_path: Path to SQLite database file, or ``":memory:"``. Defaults to
            ``global_config.default_db_path()``.

    Returns:
        Configured SQLite connection ready for use.

    Logs:
        - DEBUG: "Opening SQLite database at {path}" when creating connection.

    Side Effects:
        - Creates parent directory if it doesn't exist.
        - Creates database file if it doesn't exist.
    """
    if db_path == ":memory:":
        logger.debug("Opening in-memory SQLite database")
        conn = sqlite3.connect(":memory:")
        _configure_connection(conn)
        return conn

    resolved = Path(db_path) if db_path is not None else g.default_db_path()
    resolved.parent.mkdir(parents=True, exist_ok=True)
    logger.debug("Opening SQLite database at %s", resolved)
    conn = sqlite3.connect(str(resolved))
    _configure_connection(conn)
    return conn


@contextlib.contextmanager
def transaction(
    db_path: Path | str | None = None,
    existing_connection: sqlite3.Connection | None = None,
) -> Iterator[sqlite3.Connection]:
    """Context manager for a transactional connection block.

    Commits on success and rolls back on error. If an existing connection is
    provided, it is reused and not closed; otherwise a new connection is
    opened and closed on exit.

    Args:
        db_path: Path to database file (only used if existing_connection
            is None). Defaults to global config.
        existing_connection: Existing connection to reuse.

    Yields:
        SQLite connection ready for database operations.

    Logs:
        - DEBUG: "Beginning transaction" at start
        - DEBUG: "Transaction committed" on success
        - ERROR: "Transaction rolled back due to error" on failure
    """
    owns_connection = existing_connection is None
    conn = existing_connection or get_connection(db_path=db_path)

    try:
        logger.debug("Beginning transaction")
        yield conn
        conn.commit()
        logger.debug("Transaction committed")
    except Exception:
        logger.exception("Transaction rolled back due to error")
        conn.rollback()
        raise
    finally:
        if owns_connection:
            conn.close()
            logger.debug("Connection closed")
