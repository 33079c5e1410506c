"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

from db.connection import Executor
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for create/read operations on the users table."""

    def __init__(self, db: Executor):
        self.db = db

    # ── CREATE ────────────────────────────────────────────

    def add(self, user: User) -> User:
        """
        Insert a new user.

        Args:
            user: The User to persist (name, email and password set).

        Returns:
            The stored User, including its generated id.

        Raises:
            DuplicateRecordError: If the email is already registered.
            QueryError: On any other database failure.
        """
        sql = """
            INSERT INTO users (name, email, password)
            VALUES (%s, %s, %s)
            RETURNING *;
        """
        row = self.db.fetch_one(sql, (user.name, user.email, user.password))
        created = self._row_to_user(row)
        logger.info(f"Added user #{created.id}")
        return created

    # ── READ ──────────────────────────────────────────────

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Fetch a user by email (exact, case-sensitive match).

        Returns:
            A User or None if not found.
        """
        sql = "SELECT * FROM users WHERE email = %s LIMIT 1;"
        row = self.db.fetch_one(sql, (email,))
        return self._row_to_user(row) if row else None

    def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Fetch a user by primary key.

        Returns:
            A User or None if not found.
        """
        sql = "SELECT * FROM users WHERE id = %s LIMIT 1;"
        row = self.db.fetch_one(sql, (user_id,))
        return self._row_to_user(row) if row else None

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_user(row: dict) -> User:
        """Convert a database row to a User domain object."""
        return User(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            password=row["password"],
        )
