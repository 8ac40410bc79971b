"""
Security helpers for password hashing and session tokens.

Passwords are hashed with bcrypt; the cost factor is taken from
``Settings.password_hash_rounds``.  Session tokens are random uuid4
strings stored server side by ``SessionStore``; they carry no claims and
never expire on their own.  Clients send them in the ``Authorization``
header as ``Bearer <token>``.
"""

import base64
import hashlib
import uuid
from typing import Optional

import bcrypt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .errors import AuthError


DEFAULT_HASH_ROUNDS = 10


def _prehash(password: str) -> bytes:
    """Reduce a password of any length to 44 bytes, below bcrypt's 72-byte limit."""
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def hash_password(password: str, rounds: int = DEFAULT_HASH_ROUNDS) -> str:
    """Hash a password with bcrypt.

    A new salt is generated for each call, so hashing the same password
    twice yields different strings.  The salt and cost factor are
    embedded in the returned hash.  The password is first reduced to
    the base64 of its SHA-256 digest so that passwords longer than
    bcrypt's 72-byte input limit are hashed in full.

    Parameters
    ----------
    password : str
        The plain text password to hash.
    rounds : int
        bcrypt cost factor (log2 of the number of iterations).

    Returns
    -------
    str
        The bcrypt hash, e.g. ``$2b$10$...``.
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_prehash(password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored bcrypt hash.

    Returns ``False`` instead of raising when the stored value is not a
    valid bcrypt hash.
    """
    try:
        return bcrypt.checkpw(_prehash(plain_password), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def generate_session_token() -> str:
    """Return a fresh, unguessable session token."""
    return str(uuid.uuid4())


bearer_scheme = HTTPBearer(auto_error=False)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """Dependency that extracts the bearer token from the request.

    Raises ``AuthError`` (HTTP 401) when the ``Authorization`` header is
    missing, uses another scheme or carries an empty token.
    """
    if credentials is None or not credentials.credentials:
        raise AuthError("Token not provided")
    return credentials.credentials
