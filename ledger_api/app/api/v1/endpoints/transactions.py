"""
Ledger endpoints: record a deposit/withdrawal and list the history.

Both routes require a bearer token.  When recording, the token's
presence is checked first, then the body, and only then is the session
looked up.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Path, status

from ledger_api.app.api.deps import (
    get_clock,
    get_current_user,
    get_ledger_store,
    get_session_store,
    get_user_store,
    resolve_session_user,
)
from ledger_api.app.core.clock import Clock, ledger_date
from ledger_api.app.core.security import get_bearer_token
from ledger_api.app.core.validation import RequestShape, validate_payload
from ledger_api.app.schemas.transaction import TransactionHistory, TransactionRead
from ledger_api.app.schemas.user import UserRecord
from ledger_api.app.services.ledger_service import LedgerStore
from ledger_api.app.services.session_service import SessionStore
from ledger_api.app.services.user_service import UserStore


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/{kind}", response_model=TransactionRead, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    kind: str = Path(..., description="deposit or withdrawal"),
    payload: Any = Body(None),
    token: str = Depends(get_bearer_token),
    sessions: SessionStore = Depends(get_session_store),
    users: UserStore = Depends(get_user_store),
    ledger: LedgerStore = Depends(get_ledger_store),
    clock: Clock = Depends(get_clock),
) -> TransactionRead:
    """Record a transaction for the authenticated user, dated today (``DD/MM``)."""
    body = dict(payload, kind=kind) if isinstance(payload, dict) else payload
    data = validate_payload(RequestShape.TRANSACTION, body)
    user = await resolve_session_user(token, sessions, users)
    transaction = await ledger.add_transaction(
        owner_email=user.email,
        kind=data.kind,
        amount=data.amount,
        description=data.description,
        date=ledger_date(clock),
    )
    logger.info("Recorded %s of %s for %s", data.kind.value, data.amount, user.email)
    return transaction


@router.get("", response_model=TransactionHistory)
async def list_transactions(
    current_user: UserRecord = Depends(get_current_user),
    ledger: LedgerStore = Depends(get_ledger_store),
) -> TransactionHistory:
    """Return the authenticated user's full history in recording order."""
    transactions = await ledger.list_transactions(current_user.email)
    return TransactionHistory(
        transactions=transactions,
        name=current_user.name,
        id=current_user.id,
    )
