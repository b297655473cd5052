from __future__ import annotations

import logging
from decimal import Decimal

from accessible_bank.core.errors import (
    AccountNotFound,
    BankError,
    CurrencyMismatch,
    InsufficientFunds,
    InvalidAmount,
    NotOwner,
    SameAccount,
)
from accessible_bank.models.account import Account
from accessible_bank.models.transaction import Transaction
from accessible_bank.services.repository import LedgerRepository
from accessible_bank.utils.timezone import utcnow

logger = logging.getLogger(__name__)


def _lock_accounts(repo: LedgerRepository, from_id: int, to_id: int) -> dict[int, Account | None]:
    # Always lock in ascending id order so two opposite transfers cannot deadlock.
    return {aid: repo.get_account(aid, lock=True) for aid in sorted({from_id, to_id})}


def check_transfer(caller_owner_id: int, src: Account | None, dst: Account | None, amount: Decimal) -> None:
    """Apply the transfer rules in their fixed order.

    Raises the first matching ``BankError``. A zero source balance is
    rejected as insufficient funds even when ``amount`` is zero.
    """
    if src is None or dst is None:
        raise AccountNotFound()
    if src.owner_id != caller_owner_id:
        raise NotOwner()
    balance = Decimal(src.balance or 0)
    if balance == 0:
        raise InsufficientFunds()
    if balance < amount:
        raise InsufficientFunds()
    if src.id == dst.id:
        raise SameAccount()
    if src.currency != dst.currency:
        raise CurrencyMismatch()
    if amount <= 0:
        raise InvalidAmount()


def attempt_transfer(
    repo: LedgerRepository,
    caller_owner_id: int,
    from_account_id: int,
    to_account_id: int,
    amount: Decimal,
    description: str | None = None,
    category: str | None = None,
) -> Transaction:
    """Move ``amount`` between two accounts and record one ledger row.

    Both balance updates and the ledger insert are committed together; on any
    rejection the unit of work is rolled back and nothing is persisted.
    """
    amount = Decimal(amount)
    try:
        accounts = _lock_accounts(repo, from_account_id, to_account_id)
        src = accounts[from_account_id]
        dst = accounts[to_account_id]
        check_transfer(caller_owner_id, src, dst, amount)

        src.balance = Decimal(src.balance) - amount
        dst.balance = Decimal(dst.balance) + amount

        tx = Transaction(
            from_account_id=src.id,
            to_account_id=dst.id,
            amount=amount,
            date=utcnow(),
            description=description,
            category=category,
        )
        repo.add_transaction(tx)
        repo.commit()
    except BankError as e:
        repo.rollback()
        logger.warning(
            "transfer rejected: %s (owner=%s from=%s to=%s amount=%s)",
            e.detail, caller_owner_id, from_account_id, to_account_id, amount,
        )
        raise
    except Exception:
        repo.rollback()
        raise

    logger.info(
        "transfer committed: tx=%s from=%s to=%s amount=%s",
        tx.id, from_account_id, to_account_id, amount,
    )
    return tx
