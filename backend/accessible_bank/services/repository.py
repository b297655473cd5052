"""Storage seam for the transfer rules.

``attempt_transfer`` only talks to a ``LedgerRepository``; the SQLAlchemy
implementation below is what the API uses, tests can swap in a dict-backed
fake with the same four methods.
"""
from __future__ import annotations

from typing import Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session

from accessible_bank.models.account import Account
from accessible_bank.models.transaction import Transaction


class LedgerRepository(Protocol):
    def get_account(self, account_id: int, lock: bool = False) -> Account | None: ...

    def add_transaction(self, tx: Transaction) -> None: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


class SqlLedgerRepository:
    def __init__(self, s: Session):
        self.s = s

    def get_account(self, account_id: int, lock: bool = False) -> Account | None:
        q = select(Account).where(Account.id == account_id)
        if lock:
            # Row lock held until commit/rollback; no-op on SQLite.
            q = q.with_for_update()
        return self.s.execute(q).scalar_one_or_none()

    def add_transaction(self, tx: Transaction) -> None:
        self.s.add(tx)

    def commit(self) -> None:
        self.s.commit()

    def rollback(self) -> None:
        self.s.rollback()
