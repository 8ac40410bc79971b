"""
Account endpoints: registration, login and logout.

Bodies are accepted as raw JSON and checked by the request validator
so that exactly one, well-classified problem is reported per request.
Passwords are hashed and checked in the thread pool because bcrypt is
deliberately slow.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Path, status
from fastapi.concurrency import run_in_threadpool

from ledger_api.app.api.deps import get_session_store, get_settings, get_user_store
from ledger_api.app.core.config import Settings
from ledger_api.app.core.errors import AuthError, ConflictError, NotFoundError
from ledger_api.app.core.security import (
    generate_session_token,
    get_bearer_token,
    hash_password,
    verify_password,
)
from ledger_api.app.core.validation import RequestShape, validate_payload
from ledger_api.app.schemas.user import LoginResponse, UserRead
from ledger_api.app.services.session_service import SessionStore
from ledger_api.app.services.user_service import UserStore


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(
    payload: Any = Body(None),
    users: UserStore = Depends(get_user_store),
    settings: Settings = Depends(get_settings),
) -> UserRead:
    """Register a new account.

    Fails with 422 on an invalid payload and 409 when the email is
    already registered.
    """
    data = validate_payload(RequestShape.REGISTER, payload)
    if await users.get_by_email(data.email):
        raise ConflictError("Email already registered")
    password_hash = await run_in_threadpool(
        hash_password, data.password, settings.password_hash_rounds
    )
    user = await users.create_user(data.name, data.email, password_hash)
    logger.info("Registered user %s", user.email)
    return user.public()


@router.post("/login", response_model=LoginResponse)
async def login_user(
    payload: Any = Body(None),
    users: UserStore = Depends(get_user_store),
    sessions: SessionStore = Depends(get_session_store),
) -> LoginResponse:
    """Check credentials and open a session.

    Returns the new session token and the user's name.  A user may hold
    a single session; logging in again before logging out yields 409.
    """
    data = validate_payload(RequestShape.LOGIN, payload)
    user = await users.get_by_email(data.email)
    if user is None:
        raise NotFoundError("User not found")
    if not await run_in_threadpool(verify_password, data.password, user.password_hash):
        logger.warning("Wrong password for %s", data.email)
        raise AuthError("Wrong password")
    if await sessions.get_by_user(user.id):
        raise ConflictError("User is already logged in")
    session = await sessions.create_session(generate_session_token(), user.id)
    logger.info("User %s logged in", user.email)
    return LoginResponse(token=session.token, name=user.name)


@router.delete("/logout")
async def logout_current_session(
    token: str = Depends(get_bearer_token),
    sessions: SessionStore = Depends(get_session_store),
) -> dict:
    """Close the session identified by the bearer token.

    Succeeds whether or not the session still existed.
    """
    await sessions.delete_session(token)
    return {"detail": "Logged out"}


@router.delete("/logout/{token}")
async def logout_by_path_token(
    token: str = Path(..., description="Session token to close"),
    sessions: SessionStore = Depends(get_session_store),
) -> dict:
    """Close the session whose token is given in the path.

    Kept for clients that send the token as a path segment instead of
    an ``Authorization`` header.  Idempotent.
    """
    await sessions.delete_session(token)
    return {"detail": "Logged out"}
