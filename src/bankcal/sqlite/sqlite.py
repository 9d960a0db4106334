"""SQLite bootstrap: connection setup and sequential schema migrations.

Usage:
    conn = connect(env_path() or "bankcal.db")
    migrate(conn, [
        "CREATE TABLE IF NOT EXISTS files (id TEXT PRIMARY KEY, created_at TEXT);",
    ])

Migrations run in order. The first failing statement aborts the run; the
statements after it are not attempted.
"""

from __future__ import annotations

import logging
import os
import sqlite3
from typing import Sequence

logger = logging.getLogger(__name__)

# --- Constants ---
SQLITE_DB_PATH_ENV = "SQLITE_DB_PATH"
MIGRATION_EXCERPT_LENGTH = 40


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------
class DatabaseError(Exception):
    """Base class for database bootstrap failures."""
    pass


class ConnectionOpenError(DatabaseError):
    """Raised when the database file cannot be opened."""
    pass


class PingError(DatabaseError):
    """Raised when an opened connection fails its connectivity check."""
    pass


class MigrationError(DatabaseError):
    """Raised when a migration statement fails.

    Attributes:
        index: 0-based ordinal of the failing statement.
        statement: the full failing statement.
    """

    def __init__(self, index: int, statement: str, cause: Exception) -> None:
        self.index = index
        self.statement = statement
        super().__init__(
            f"migration #{index} [{_excerpt(statement)}...] had problem: {cause}"
        )


def _excerpt(statement: str) -> str:
    return statement[:MIGRATION_EXCERPT_LENGTH]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def env_path() -> str:
    """Return the database path from SQLITE_DB_PATH.

    Paths containing ".." are refused (empty string) so the database cannot
    be placed outside the working tree.
    """
    path = os.environ.get(SQLITE_DB_PATH_ENV, "")
    if ".." in path:
        return ""
    return path


def connect(path: str) -> sqlite3.Connection:
    """Open the SQLite database at ``path`` and verify it answers a query.

    Raises:
        ConnectionOpenError: If the file cannot be opened.
        PingError: If the opened connection cannot run a trivial query.
    """
    try:
        conn = sqlite3.connect(path)
    except sqlite3.Error as e:
        logger.error(f"problem opening sqlite3 file {path}: {e}")
        raise ConnectionOpenError(f"problem opening sqlite3 file {path}: {e}") from e

    try:
        conn.execute("SELECT 1").fetchone()
    except sqlite3.Error as e:
        conn.close()
        raise PingError(f"problem with ping against sqlite3 file {path}: {e}") from e
    return conn


def migrate(conn: sqlite3.Connection, migrations: Sequence[str]) -> None:
    """Run ``migrations`` in order, committing after each statement.

    Raises:
        MigrationError: On the first failing statement; later statements
            are not run.
    """
    logger.info("starting database migrations")
    for i, statement in enumerate(migrations):
        try:
            cursor = conn.execute(statement)
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise MigrationError(i, statement, e) from e
        logger.info(
            f"migration #{i} [{_excerpt(statement)}...] changed {cursor.rowcount} rows"
        )
    logger.info("finished migrations")
