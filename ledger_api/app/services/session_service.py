"""
Session store.

A session links an opaque token to a user id and represents the
"logged in" state.  Each user has at most one session: ``sessions``
has a unique index on ``user_id`` so a concurrent second login fails
with ``ConflictError`` instead of creating a duplicate.
"""

import logging
import sqlite3
from typing import Optional

from pydantic import BaseModel

from ..core.db import Database
from ..core.errors import ConflictError, StoreError


logger = logging.getLogger(__name__)


class Session(BaseModel):
    token: str
    user_id: int


class SessionStore:
    """Persistence for active sessions."""

    def __init__(self, database: Database) -> None:
        self.database = database

    async def create_session(self, token: str, user_id: int) -> Session:
        try:
            with self.database.cursor() as cursor:
                cursor.execute(
                    "INSERT INTO sessions (token, user_id) VALUES (?, ?)",
                    (token, user_id),
                )
        except sqlite3.IntegrityError as exc:
            raise ConflictError("User is already logged in") from exc
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        return Session(token=token, user_id=user_id)

    async def get_by_token(self, token: str) -> Optional[Session]:
        try:
            with self.database.cursor() as cursor:
                row = cursor.execute(
                    "SELECT token, user_id FROM sessions WHERE token = ?", (token,)
                ).fetchone()
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        return Session(token=row["token"], user_id=row["user_id"]) if row else None

    async def get_by_user(self, user_id: int) -> Optional[Session]:
        try:
            with self.database.cursor() as cursor:
                row = cursor.execute(
                    "SELECT token, user_id FROM sessions WHERE user_id = ?", (user_id,)
                ).fetchone()
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        return Session(token=row["token"], user_id=row["user_id"]) if row else None

    async def delete_session(self, token: str) -> bool:
        """Remove the session for ``token``.

        Returns whether a session was actually deleted; deleting an
        unknown token is not an error.
        """
        try:
            with self.database.cursor() as cursor:
                cursor.execute("DELETE FROM sessions WHERE token = ?", (token,))
                deleted = cursor.rowcount > 0
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        if deleted:
            logger.info("Deleted session ...%s", token[-4:])
        return deleted
