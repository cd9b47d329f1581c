"""Database layer for eventledger application."""

from eventledger.database.base import Database
from eventledger.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "create_database", "create_sqlite_database"]
