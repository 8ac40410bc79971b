"""
Pydantic models for ledger entries.

A transaction is either a ``deposit`` (income) or a ``withdrawal``
(expense).  Entries are owned by the user's email and carry the day
they were recorded as ``DD/MM``.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator


class TransactionKind(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


class TransactionCreate(BaseModel):
    """Schema for recording a transaction.

    ``kind`` comes from the URL path, ``amount`` and ``description`` from
    the JSON body.  Numeric strings such as ``"12.50"`` are accepted for
    ``amount``; anything that does not parse to a finite number is
    rejected.
    """

    kind: TransactionKind
    amount: float = Field(..., allow_inf_nan=False, examples=[50.0])
    description: str = Field(..., min_length=1, examples=["salary"])

    @field_validator("amount", mode="before")
    @classmethod
    def reject_booleans(cls, value):
        if isinstance(value, bool):
            raise ValueError("amount must be a number")
        return value


class TransactionRead(BaseModel):
    """Schema for reading a transaction."""

    id: int
    owner_email: str
    kind: TransactionKind
    amount: float
    description: str
    date: str = Field(..., examples=["17/10"])

    model_config = {
        "from_attributes": True,
    }


class TransactionHistory(BaseModel):
    """The full history of a user, together with who they are."""

    transactions: List[TransactionRead]
    name: str
    id: int
