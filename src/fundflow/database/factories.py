"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from fundflow.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks FUNDFLOW_DB_PATH
            environment variable, then defaults to ~/.fundflow/fundflow.db.
            ":memory:" gives a throwaway in-memory database.

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("FUNDFLOW_DB_PATH")

    if database_path is None:
        # Default to ~/.fundflow/fundflow.db
        home = Path.home()
        db_dir = home / ".fundflow"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "fundflow.db")

    if database_path == ":memory:":
        return SQLAlchemyDatabase("sqlite://")

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)
