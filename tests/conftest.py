"""
Shared fixtures: an in-memory stand-in for ``db.connection.Database`` and a
mocked psycopg2 pool for exercising the real one.
"""

from contextlib import contextmanager
from typing import Any
from unittest.mock import MagicMock

import pytest


class FakeDatabase:
    """Records executed statements and replays queued row sets (or errors)."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, list[Any]]] = []
        self._results: list[Any] = []
        self.transactions = 0

    def queue(self, *results: Any) -> None:
        self._results.extend(results)

    def execute(self, sql: str, params=()) -> list[dict]:
        self.calls.append((sql, list(params)))
        if not self._results:
            return []
        result = self._results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    def fetch_one(self, sql: str, params=()):
        rows = self.execute(sql, params)
        return rows[0] if rows else None

    @contextmanager
    def transaction(self):
        self.transactions += 1
        yield self

    @property
    def last_sql(self) -> str:
        """Most recent statement with whitespace collapsed."""
        return " ".join(self.calls[-1][0].split())

    @property
    def last_params(self) -> list[Any]:
        return self.calls[-1][1]


@pytest.fixture()
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture()
def pg(monkeypatch):
    """Patch SimpleConnectionPool so a real Database talks to mocks instead of a server."""
    cursor = MagicMock()
    cursor.description = [("id",)]
    cursor.fetchall.return_value = [{"id": 1}]
    conn = MagicMock()
    conn.cursor.return_value.__enter__.return_value = cursor
    pool_instance = MagicMock()
    pool_instance.getconn.return_value = conn
    factory = MagicMock(return_value=pool_instance)
    monkeypatch.setattr("db.connection.pool.SimpleConnectionPool", factory)
    return MagicMock(factory=factory, pool=pool_instance, conn=conn, cursor=cursor)
