"""
Top-level router for version 1 of the API.

Aggregates the account and ledger routers.  Account routes sit at the
root (``/register``, ``/login``, ``/logout``); ledger routes live under
``/transactions``.
"""

from fastapi import APIRouter

from .endpoints import auth, transactions

router = APIRouter()

router.include_router(auth.router, tags=["auth"])
router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
