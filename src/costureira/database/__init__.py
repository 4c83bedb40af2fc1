"""Database layer for costureira application."""

from costureira.database.base import Database
from costureira.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "create_database", "create_sqlite_database"]
