"""Database engine and session lifecycle."""

from .lifecycle import (
    close_database,
    create_engine,
    create_session_factory,
    create_tables,
    enable_sqlite_write_locks,
    get_session_factory,
    init_database,
)

__all__ = [
    "close_database",
    "create_engine",
    "create_session_factory",
    "create_tables",
    "enable_sqlite_write_locks",
    "get_session_factory",
    "init_database",
]
