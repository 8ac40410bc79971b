"""
FastAPI dependencies shared by the endpoints.

``create_app`` stores the settings, the database and the clock on
``app.state``; the functions below hand them (or stores built on top
of them) to the endpoints.  ``get_current_user`` resolves a bearer
token to the user that owns the session.
"""

from fastapi import Depends, Request

from ..core.clock import Clock
from ..core.config import Settings
from ..core.db import Database
from ..core.errors import AuthError, NotFoundError
from ..core.security import get_bearer_token
from ..schemas.user import UserRecord
from ..services.ledger_service import LedgerStore
from ..services.session_service import SessionStore
from ..services.user_service import UserStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_clock(request: Request) -> Clock:
    return request.app.state.clock


def get_user_store(database: Database = Depends(get_database)) -> UserStore:
    return UserStore(database)


def get_session_store(database: Database = Depends(get_database)) -> SessionStore:
    return SessionStore(database)


def get_ledger_store(database: Database = Depends(get_database)) -> LedgerStore:
    return LedgerStore(database)


async def resolve_session_user(token: str, sessions: SessionStore, users: UserStore) -> UserRecord:
    """Return the user owning the session identified by ``token``.

    Raises ``AuthError`` when no session matches the token and
    ``NotFoundError`` when the session points at a user that no longer
    exists.
    """
    session = await sessions.get_by_token(token)
    if session is None:
        raise AuthError("Invalid or expired session")
    user = await users.get_by_id(session.user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


async def get_current_user(
    token: str = Depends(get_bearer_token),
    sessions: SessionStore = Depends(get_session_store),
    users: UserStore = Depends(get_user_store),
) -> UserRecord:
    """Dependency that retrieves the user behind the request's bearer token."""
    return await resolve_session_user(token, sessions, users)
