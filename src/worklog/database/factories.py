"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from loguru import logger

from worklog.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV = "WORKLOG_DB_PATH"
DEFAULT_DB_DIR = ".worklog"
DEFAULT_DB_NAME = "worklog.db"


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Pick the SQLite file to use.

    An explicit path wins, then the WORKLOG_DB_PATH environment variable, then
    ~/.worklog/worklog.db. The parent directory is created when missing.
    """
    chosen = database_path or os.environ.get(DB_PATH_ENV)
    if chosen:
        path = Path(chosen).expanduser()
    else:
        path = Path.home() / DEFAULT_DB_DIR / DEFAULT_DB_NAME
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file (see resolve_database_path)

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    path = resolve_database_path(database_path)
    logger.debug("Opening SQLite database at {}", path)
    return SQLAlchemyDatabase(f"sqlite:///{path}")
