"""Database layer for expensebook application."""

from expensebook.database.base import Database
from expensebook.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
