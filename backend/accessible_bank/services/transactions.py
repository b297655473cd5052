from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from sqlalchemy import Select, or_, select
from sqlalchemy.orm import Session

from accessible_bank.models.account import Account
from accessible_bank.models.transaction import Transaction


@dataclass
class TxFilters:
    min_amount: Decimal | None = None
    max_amount: Decimal | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None
    category: str | None = None
    description: str | None = None


def _blank(v: str | None) -> bool:
    return v is None or not v.strip()


def owner_transactions_query(owner_id: int, f: TxFilters) -> Select:
    """Transactions where the owner holds either side, newest first."""
    mine = select(Account.id).where(Account.owner_id == owner_id)
    q = select(Transaction).where(
        or_(Transaction.from_account_id.in_(mine), Transaction.to_account_id.in_(mine))
    )
    if f.min_amount is not None:
        q = q.where(Transaction.amount >= f.min_amount)
    if f.max_amount is not None:
        q = q.where(Transaction.amount <= f.max_amount)
    if f.date_from is not None:
        q = q.where(Transaction.date >= f.date_from)
    if f.date_to is not None:
        q = q.where(Transaction.date <= f.date_to)
    if not _blank(f.category):
        q = q.where(Transaction.category.icontains(f.category.strip(), autoescape=True))
    if not _blank(f.description):
        q = q.where(Transaction.description.icontains(f.description.strip(), autoescape=True))
    return q.order_by(Transaction.date.desc(), Transaction.id.desc())


def list_transactions(s: Session, owner_id: int, f: TxFilters, page: int = 1, page_size: int = 10) -> list[Transaction]:
    q = owner_transactions_query(owner_id, f).offset((page - 1) * page_size).limit(page_size)
    return list(s.execute(q).scalars().all())


def all_transactions(s: Session, owner_id: int, f: TxFilters) -> list[Transaction]:
    return list(s.execute(owner_transactions_query(owner_id, f)).scalars().all())


def source_currencies(s: Session, txs: list[Transaction]) -> dict[int, str]:
    ids = {t.from_account_id for t in txs}
    if not ids:
        return {}
    rows = s.execute(select(Account.id, Account.currency).where(Account.id.in_(ids))).all()
    return {aid: cur for (aid, cur) in rows}
