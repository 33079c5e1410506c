"""
models/user.py
--------------
Domain model for registered users (guests and property owners).
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    Represents a row of the users table.

    Attributes:
        name: Display name.
        email: Login email, unique across users.
        password: Already-hashed password; treated as an opaque string.
        id: Database primary key (None for new records).
    """
    name: str
    email: str
    password: str
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
