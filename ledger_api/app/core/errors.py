"""
Error taxonomy shared by the stores, the validator and the endpoints.

Every error raised on purpose by the application derives from
``LedgerError`` and knows the HTTP status it maps to.  The exception
handlers registered by ``install_error_handlers`` turn them into JSON
responses of the form ``{"detail": "..."}``, matching the shape of
FastAPI's own ``HTTPException`` responses.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class ValidationFailure(str, Enum):
    """Classification of the first problem found in a request payload."""

    INVALID_EMAIL = "invalid_email"
    PASSWORD_MISMATCH = "password_mismatch"
    PASSWORD_TOO_SHORT = "password_too_short"
    INVALID_KIND = "invalid_kind"
    INVALID = "invalid"


VALIDATION_MESSAGES: Dict[ValidationFailure, str] = {
    ValidationFailure.INVALID_EMAIL: "Invalid email",
    ValidationFailure.PASSWORD_MISMATCH: "Passwords do not match",
    ValidationFailure.PASSWORD_TOO_SHORT: "Password must be at least 3 characters long",
    ValidationFailure.INVALID_KIND: "Transaction kind must be 'deposit' or 'withdrawal'",
    ValidationFailure.INVALID: "Invalid data",
}


class LedgerError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return None

    def to_body(self) -> dict:
        return {"detail": self.message}


class RequestValidationFailed(LedgerError):
    """Malformed or missing fields in a request payload."""

    status_code = 422

    def __init__(self, failure: ValidationFailure) -> None:
        self.failure = failure
        super().__init__(VALIDATION_MESSAGES[failure])

    def to_body(self) -> dict:
        return {"detail": self.message, "code": self.failure.value}


class ConflictError(LedgerError):
    """Duplicate registration or a second session for the same user."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class AuthError(LedgerError):
    """Missing token, unknown session or wrong password."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return {"WWW-Authenticate": "Bearer"}


class NotFoundError(LedgerError):
    """Unknown user."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class StoreError(LedgerError):
    """Any failure of the underlying database."""


def install_error_handlers(app: FastAPI, expose_store_errors: bool = False) -> None:
    """Register JSON renderers for ``LedgerError`` and its subclasses.

    Storage failures are logged with their traceback.  Their original
    message only reaches the client when ``expose_store_errors`` is set.
    """

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        logger.error(
            "Storage failure on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc,
        )
        detail = exc.message if expose_store_errors else StoreError.default_message
        return JSONResponse(status_code=exc.status_code, content={"detail": detail})

    @app.exception_handler(LedgerError)
    async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_body(), headers=exc.headers)
