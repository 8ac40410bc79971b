"""
Credential store.

``UserStore`` keeps user identities (name, email and bcrypt hash) in
the ``users`` table.  Users are never updated or deleted.  Email
uniqueness is enforced by a unique index; an insert that collides with
an existing email raises ``ConflictError`` even when it slipped past
the caller's own existence check.
"""

import logging
import sqlite3
from typing import Optional

from ..core.db import Database
from ..core.errors import ConflictError, StoreError
from ..schemas.user import UserRecord


logger = logging.getLogger(__name__)


class UserStore:
    """Persistence for user records."""

    def __init__(self, database: Database) -> None:
        self.database = database

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> UserRecord:
        return UserRecord(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            password_hash=row["password_hash"],
        )

    async def create_user(self, name: str, email: str, password_hash: str) -> UserRecord:
        """Insert a new user and return the stored record."""
        try:
            with self.database.cursor() as cursor:
                cursor.execute(
                    "INSERT INTO users (name, email, password_hash) VALUES (?, ?, ?)",
                    (name, email, password_hash),
                )
                user_id = cursor.lastrowid
        except sqlite3.IntegrityError as exc:
            raise ConflictError("Email already registered") from exc
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        logger.info("Stored user %s with id %s", email, user_id)
        return UserRecord(id=user_id, name=name, email=email, password_hash=password_hash)

    async def get_by_email(self, email: str) -> Optional[UserRecord]:
        try:
            with self.database.cursor() as cursor:
                row = cursor.execute(
                    "SELECT id, name, email, password_hash FROM users WHERE email = ?",
                    (email,),
                ).fetchone()
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        return self._row_to_user(row) if row else None

    async def get_by_id(self, user_id: int) -> Optional[UserRecord]:
        try:
            with self.database.cursor() as cursor:
                row = cursor.execute(
                    "SELECT id, name, email, password_hash FROM users WHERE id = ?",
                    (user_id,),
                ).fetchone()
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        return self._row_to_user(row) if row else None
