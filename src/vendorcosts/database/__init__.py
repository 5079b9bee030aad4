"""Database layer for vendorcosts application."""

from vendorcosts.database.base import Database
from vendorcosts.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
