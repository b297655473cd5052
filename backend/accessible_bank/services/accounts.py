from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from accessible_bank.core.errors import AccountNotFound, DuplicateAccount
from accessible_bank.models.account import Account

logger = logging.getLogger(__name__)


def create_account(s: Session, owner_id: int, currency: str, account_type: str) -> Account:
    exists = s.execute(
        select(Account.id).where(
            Account.owner_id == owner_id,
            Account.currency == currency,
            Account.type == account_type,
        )
    ).first()
    if exists:
        raise DuplicateAccount()

    acc = Account(owner_id=owner_id, currency=currency, type=account_type, balance=Decimal("0.00"))
    s.add(acc)
    try:
        s.commit()
    except IntegrityError:
        # Lost a race with a concurrent create; the unique constraint decides.
        s.rollback()
        raise DuplicateAccount()
    s.refresh(acc)
    logger.info("account created: id=%s owner=%s %s/%s", acc.id, owner_id, currency, account_type)
    return acc


def list_accounts(s: Session, owner_id: int) -> list[Account]:
    return list(s.execute(select(Account).where(Account.owner_id == owner_id).order_by(Account.id.asc())).scalars().all())


def get_account(s: Session, owner_id: int, account_id: int) -> Account:
    # Same error for "missing" and "not yours".
    acc = s.execute(
        select(Account).where(Account.id == account_id, Account.owner_id == owner_id)
    ).scalar_one_or_none()
    if acc is None:
        raise AccountNotFound()
    return acc
