"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from vendorcosts.database.sqlalchemy_db import SQLAlchemyDatabase

DEFAULT_TIMEOUT = 15.0


def create_sqlite_database(
    database_path: Optional[str] = None, timeout: Optional[float] = None
) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks VENDORCOSTS_DB_PATH
            environment variable, then defaults to ~/.vendorcosts/vendorcosts.db
        timeout: Seconds to wait for a locked database. If None, checks
            VENDORCOSTS_TIMEOUT environment variable, then defaults to 15

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("VENDORCOSTS_DB_PATH")

    if database_path is None:
        # Default to ~/.vendorcosts/vendorcosts.db
        home = Path.home()
        db_dir = home / ".vendorcosts"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "vendorcosts.db")

    if timeout is None:
        timeout = float(os.environ.get("VENDORCOSTS_TIMEOUT", DEFAULT_TIMEOUT))

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url, timeout=timeout)
