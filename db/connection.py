"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's SimpleConnectionPool for efficient connection reuse.

The pool is wrapped in an explicitly constructed ``Database`` handle that is
passed to every repository, so there is no process-wide connection state and
tests can hand repositories a fake.
"""

from contextlib import contextmanager
from typing import Any, Iterator, Optional, Sequence, Union

import psycopg2
from psycopg2 import errors, extras, pool

import config
from db.errors import (
    DatabaseConnectionError,
    DatabaseNotInitializedError,
    DuplicateRecordError,
    QueryError,
)
from utils.logger import get_logger

logger = get_logger(__name__)


class Database:
    """A pooled handle on a single PostgreSQL database."""

    def __init__(self, dsn: str, min_conn: int = 1, max_conn: int = 5):
        """
        Args:
            dsn: libpq connection string or URL.
            min_conn: Minimum number of connections to keep open.
            max_conn: Maximum number of connections allowed.
        """
        self.dsn = dsn
        self.min_conn = min_conn
        self.max_conn = max_conn
        self._pool: pool.SimpleConnectionPool | None = None

    @classmethod
    def from_config(cls) -> "Database":
        """Build a handle from the DATABASE_URL / DB_POOL_* settings."""
        return cls(config.DATABASE_URL, config.DB_POOL_MIN, config.DB_POOL_MAX)

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    def open(self) -> None:
        """
        Initialize the connection pool. Calling it twice is a no-op.

        Raises:
            DatabaseConnectionError: If the database is unreachable.
        """
        if self._pool is not None:
            return
        try:
            self._pool = pool.SimpleConnectionPool(self.min_conn, self.max_conn, self.dsn)
            logger.info("Database connection pool initialized successfully.")
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise DatabaseConnectionError(str(e).strip()) from e

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Database connection pool closed.")

    def __enter__(self) -> "Database":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @contextmanager
    def connection(self) -> Iterator[Any]:
        """
        Borrow a connection for the duration of a ``with`` block.

        Commits when the block exits cleanly, rolls back when it raises, and
        always hands the connection back to the pool.

        Raises:
            DatabaseNotInitializedError: If ``open()`` has not been called.
        """
        if self._pool is None:
            raise DatabaseNotInitializedError()
        conn = self._pool.getconn()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            self._pool.putconn(conn)

    @contextmanager
    def cursor(self) -> Iterator[Any]:
        """Yield a RealDictCursor (rows keyed by column name) inside ``connection()``."""
        with self.connection() as conn:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                yield cur

    @contextmanager
    def transaction(self) -> Iterator["Transaction"]:
        """
        Run several statements on one connection as a single unit.

        Yields a ``Transaction`` with the same ``execute``/``fetch_one`` API,
        so repositories can be built on it. Everything commits when the block
        exits cleanly and nothing does if it raises.
        """
        with _translate_errors("COMMIT"):
            with self.cursor() as cur:
                yield Transaction(cur)

    def execute(self, sql: str, params: Sequence[Any] = ()) -> list[dict]:
        """
        Run one parameterized statement in its own transaction and return its rows.

        Args:
            sql: Statement using ``%s`` placeholders.
            params: Values bound to the placeholders, in order.

        Returns:
            All result rows as dicts, or ``[]`` for statements without a result set.

        Raises:
            DuplicateRecordError: On a unique constraint violation.
            QueryError: On any other driver-level failure.
        """
        with _translate_errors(sql):
            with self.cursor() as cur:
                return _run(cur, sql, params)

    def fetch_one(self, sql: str, params: Sequence[Any] = ()) -> Optional[dict]:
        """Run a statement and return its first row, or None if it produced none."""
        rows = self.execute(sql, params)
        return rows[0] if rows else None


class Transaction:
    """Statements sharing one open cursor; committed or rolled back by ``Database.transaction()``."""

    def __init__(self, cursor: Any):
        self._cursor = cursor

    def execute(self, sql: str, params: Sequence[Any] = ()) -> list[dict]:
        with _translate_errors(sql):
            return _run(self._cursor, sql, params)

    def fetch_one(self, sql: str, params: Sequence[Any] = ()) -> Optional[dict]:
        rows = self.execute(sql, params)
        return rows[0] if rows else None


# Anything repositories can run statements through.
Executor = Union[Database, Transaction]


def _run(cur: Any, sql: str, params: Sequence[Any]) -> list[dict]:
    cur.execute(sql, tuple(params))
    if cur.description is None:
        return []
    return [dict(row) for row in cur.fetchall()]


@contextmanager
def _translate_errors(sql: str) -> Iterator[None]:
    """Re-raise psycopg2 errors as the data-access exception types."""
    try:
        yield
    except errors.UniqueViolation as e:
        logger.error(f"Unique constraint violated: {e}")
        raise DuplicateRecordError(str(e).strip(), sql) from e
    except psycopg2.Error as e:
        logger.error(f"Query failed: {e}")
        raise QueryError(str(e).strip(), sql) from e
