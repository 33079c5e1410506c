"""
db/errors.py
------------
Exception hierarchy for the data-access layer.

Every failure leaves this layer as a subclass of ``DataAccessError``; a
successful call always returns data. "Not found" is not an error and is
reported as ``None`` (single row) or ``[]`` (row sets).
"""

from typing import Optional


class DataAccessError(Exception):
    """Base class for all data-access failures."""


class DatabaseNotInitializedError(DataAccessError):
    """The connection pool was used before ``Database.open()``."""

    def __init__(self, detail: str = "Database pool not initialized. Call open() first."):
        super().__init__(detail)


class DatabaseConnectionError(DataAccessError):
    """The database server could not be reached or rejected the credentials."""


class QueryError(DataAccessError):
    """A statement failed to execute."""

    def __init__(self, detail: str, sql: Optional[str] = None):
        super().__init__(detail)
        self.sql = sql


class DuplicateRecordError(QueryError):
    """An insert violated a unique constraint (e.g. an already registered email)."""


class FixtureError(DataAccessError):
    """A seed fixture file could not be read or parsed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Invalid fixture {path}: {reason}")
        self.path = path
