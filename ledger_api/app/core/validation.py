"""
Request payload validation.

Payloads are checked against the pydantic schema declared for their
shape before any store is touched.  Only one problem is reported per
request: all errors pydantic finds are classified, and the first one
in the shape's precedence list wins.  For registration that is
invalid email, then password mismatch, then a too-short password and
finally any other problem.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Set, Tuple, Type

from pydantic import BaseModel, ValidationError

from ..schemas.transaction import TransactionCreate
from ..schemas.user import UserCreate, UserLogin
from .errors import RequestValidationFailed, ValidationFailure


logger = logging.getLogger(__name__)


class RequestShape(str, Enum):
    REGISTER = "register"
    LOGIN = "login"
    TRANSACTION = "transaction"


SCHEMAS: Dict[RequestShape, Type[BaseModel]] = {
    RequestShape.REGISTER: UserCreate,
    RequestShape.LOGIN: UserLogin,
    RequestShape.TRANSACTION: TransactionCreate,
}

PRECEDENCE: Dict[RequestShape, List[ValidationFailure]] = {
    RequestShape.REGISTER: [
        ValidationFailure.INVALID_EMAIL,
        ValidationFailure.PASSWORD_MISMATCH,
        ValidationFailure.PASSWORD_TOO_SHORT,
        ValidationFailure.INVALID,
    ],
    RequestShape.LOGIN: [
        ValidationFailure.INVALID_EMAIL,
        ValidationFailure.PASSWORD_TOO_SHORT,
        ValidationFailure.INVALID,
    ],
    RequestShape.TRANSACTION: [
        ValidationFailure.INVALID_KIND,
        ValidationFailure.INVALID,
    ],
}


def _classify_error(error: Dict[str, Any]) -> ValidationFailure:
    field = error["loc"][0] if error.get("loc") else None
    kind = error.get("type")
    if field == "email" and kind == "value_error":
        return ValidationFailure.INVALID_EMAIL
    if field == "password" and kind == "string_too_short":
        return ValidationFailure.PASSWORD_TOO_SHORT
    if field == "kind" and kind == "enum":
        return ValidationFailure.INVALID_KIND
    return ValidationFailure.INVALID


def _confirmation_mismatch(payload: Dict[str, Any]) -> bool:
    confirmation = payload.get("password_confirmation", payload.get("confirm"))
    return payload.get("password") != confirmation


def check_payload(
    shape: RequestShape, payload: Any
) -> Tuple[Optional[BaseModel], Optional[ValidationFailure]]:
    """Validate ``payload`` against ``shape``.

    Returns ``(model, None)`` when the payload is valid and
    ``(None, failure)`` otherwise.  The check is pure.
    """
    if not isinstance(payload, dict):
        return None, ValidationFailure.INVALID

    found: Set[ValidationFailure] = set()
    model: Optional[BaseModel] = None
    try:
        model = SCHEMAS[shape].model_validate(payload)
    except ValidationError as exc:
        found.update(_classify_error(error) for error in exc.errors())

    if shape is RequestShape.REGISTER and _confirmation_mismatch(payload):
        found.add(ValidationFailure.PASSWORD_MISMATCH)

    for failure in PRECEDENCE[shape]:
        if failure in found:
            return None, failure
    return model, None


def validate_payload(shape: RequestShape, payload: Any) -> BaseModel:
    """Like ``check_payload`` but raise ``RequestValidationFailed`` on error."""
    model, failure = check_payload(shape, payload)
    if failure is not None:
        logger.info("Rejected %s payload: %s", shape.value, failure.value)
        raise RequestValidationFailed(failure)
    return model
