"""Database layer for fundflow application."""

from fundflow.database.base import Database
from fundflow.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
