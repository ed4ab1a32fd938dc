"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from expensebook.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(
    database_path: Optional[str] = None, default_path: Optional[Path] = None
) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks EXPENSEBOOK_DB_PATH
            environment variable, then default_path, then ~/.expensebook/expensebook.db
        default_path: Fallback path, usually taken from the config file

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get("EXPENSEBOOK_DB_PATH")

    if database_path is None:
        path = default_path or Path.home() / ".expensebook" / "expensebook.db"
        path.parent.mkdir(parents=True, exist_ok=True)
        database_path = str(path)

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)
