"""
Ledger store.

Transactions are append-only rows in the ``transactions`` table, owned
by the user's email.  History is returned in insertion order.
"""

import sqlite3
from typing import List

from ..core.db import Database
from ..core.errors import StoreError
from ..schemas.transaction import TransactionKind, TransactionRead


class LedgerStore:
    """Persistence for ledger entries."""

    def __init__(self, database: Database) -> None:
        self.database = database

    @staticmethod
    def _row_to_transaction(row: sqlite3.Row) -> TransactionRead:
        return TransactionRead(
            id=row["id"],
            owner_email=row["owner_email"],
            kind=row["kind"],
            amount=row["amount"],
            description=row["description"],
            date=row["date"],
        )

    async def add_transaction(
        self,
        owner_email: str,
        kind: TransactionKind,
        amount: float,
        description: str,
        date: str,
    ) -> TransactionRead:
        try:
            with self.database.cursor() as cursor:
                cursor.execute(
                    """
                    INSERT INTO transactions (owner_email, kind, amount, description, date)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (owner_email, kind.value, amount, description, date),
                )
                transaction_id = cursor.lastrowid
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        return TransactionRead(
            id=transaction_id,
            owner_email=owner_email,
            kind=kind,
            amount=amount,
            description=description,
            date=date,
        )

    async def list_transactions(self, owner_email: str) -> List[TransactionRead]:
        """Return every transaction of ``owner_email`` in the order they were recorded."""
        try:
            with self.database.cursor() as cursor:
                rows = cursor.execute(
                    """
                    SELECT id, owner_email, kind, amount, description, date
                    FROM transactions
                    WHERE owner_email = ?
                    ORDER BY id ASC
                    """,
                    (owner_email,),
                ).fetchall()
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        return [self._row_to_transaction(row) for row in rows]
