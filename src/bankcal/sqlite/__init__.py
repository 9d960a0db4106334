"""SQLite bootstrap: open a database file and run schema migrations."""
from bankcal.sqlite.sqlite import (
    ConnectionOpenError,
    DatabaseError,
    MigrationError,
    PingError,
    connect,
    env_path,
    migrate,
)

__all__ = [
    "ConnectionOpenError",
    "DatabaseError",
    "MigrationError",
    "PingError",
    "connect",
    "env_path",
    "migrate",
]
