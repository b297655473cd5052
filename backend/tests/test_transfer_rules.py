from decimal import Decimal

import pytest

from accessible_bank.core.errors import (
    AccountNotFound,
    CurrencyMismatch,
    InsufficientFunds,
    InvalidAmount,
    NotOwner,
    SameAccount,
)
from accessible_bank.models.account import Account
from accessible_bank.services.transfers import attempt_transfer


class _MemoryRepo:
    """Dict-backed stand-in for SqlLedgerRepository with commit/rollback."""

    def __init__(self, accounts):
        self.accounts = {a.id: a for a in accounts}
        self.ledger = []
        self.locked = []
        self._pending = []
        self._snapshot = {aid: a.balance for aid, a in self.accounts.items()}

    def get_account(self, account_id, lock=False):
        if lock:
            self.locked.append(account_id)
        return self.accounts.get(account_id)

    def add_transaction(self, tx):
        self._pending.append(tx)

    def commit(self):
        for tx in self._pending:
            tx.id = len(self.ledger) + 1
            self.ledger.append(tx)
        self._pending = []
        self._snapshot = {aid: a.balance for aid, a in self.accounts.items()}

    def rollback(self):
        self._pending = []
        for aid, bal in self._snapshot.items():
            self.accounts[aid].balance = bal


def _acc(id: int, owner_id: int, balance: str, currency: str = "USD", type: str = "Regular") -> Account:
    return Account(id=id, owner_id=owner_id, balance=Decimal(balance), currency=currency, type=type)


OWNER_A = 1
OWNER_B = 2


def test_worked_example_sequence():
    repo = _MemoryRepo([_acc(1, OWNER_A, "100.00"), _acc(2, OWNER_A, "0.00")])

    tx = attempt_transfer(repo, OWNER_A, 1, 2, Decimal("40"))
    assert tx.id == 1
    assert repo.accounts[1].balance == Decimal("60")
    assert repo.accounts[2].balance == Decimal("40")

    with pytest.raises(InsufficientFunds):
        attempt_transfer(repo, OWNER_A, 1, 2, Decimal("100"))
    assert repo.accounts[1].balance == Decimal("60")
    assert repo.accounts[2].balance == Decimal("40")

    attempt_transfer(repo, OWNER_A, 2, 1, Decimal("0.01"))
    assert repo.accounts[1].balance == Decimal("60.01")
    assert repo.accounts[2].balance == Decimal("39.99")
    assert len(repo.ledger) == 2


def test_transfer_records_metadata_and_timestamp():
    repo = _MemoryRepo([_acc(1, OWNER_A, "10.00"), _acc(2, OWNER_B, "0.00")])
    tx = attempt_transfer(repo, OWNER_A, 1, 2, Decimal("2.50"), description="rent share", category="home")
    assert tx.from_account_id == 1
    assert tx.to_account_id == 2
    assert tx.amount == Decimal("2.50")
    assert tx.description == "rent share"
    assert tx.category == "home"
    assert tx.date is not None


def test_transfer_to_someone_elses_account_is_allowed():
    repo = _MemoryRepo([_acc(1, OWNER_A, "10.00"), _acc(2, OWNER_B, "0.00")])
    attempt_transfer(repo, OWNER_A, 1, 2, Decimal("10.00"))
    assert repo.accounts[1].balance == Decimal("0")
    assert repo.accounts[2].balance == Decimal("10.00")


@pytest.mark.parametrize("from_id,to_id", [(1, 99), (99, 1), (98, 99)])
def test_missing_account_is_not_found(from_id, to_id):
    repo = _MemoryRepo([_acc(1, OWNER_A, "10.00")])
    with pytest.raises(AccountNotFound):
        attempt_transfer(repo, OWNER_A, from_id, to_id, Decimal("1"))


def test_caller_must_own_source():
    repo = _MemoryRepo([_acc(1, OWNER_B, "10.00"), _acc(2, OWNER_A, "0.00")])
    with pytest.raises(NotOwner):
        attempt_transfer(repo, OWNER_A, 1, 2, Decimal("1"))


def test_ownership_is_checked_before_funds():
    repo = _MemoryRepo([_acc(1, OWNER_B, "0.00"), _acc(2, OWNER_A, "0.00")])
    with pytest.raises(NotOwner):
        attempt_transfer(repo, OWNER_A, 1, 2, Decimal("1"))


@pytest.mark.parametrize("amount", ["0", "0.00", "5"])
def test_zero_balance_is_always_insufficient(amount):
    repo = _MemoryRepo([_acc(1, OWNER_A, "0.00"), _acc(2, OWNER_A, "0.00")])
    with pytest.raises(InsufficientFunds):
        attempt_transfer(repo, OWNER_A, 1, 2, Decimal(amount))


def test_amount_above_balance_is_insufficient():
    repo = _MemoryRepo([_acc(1, OWNER_A, "99.99"), _acc(2, OWNER_A, "0.00")])
    with pytest.raises(InsufficientFunds):
        attempt_transfer(repo, OWNER_A, 1, 2, Decimal("100.00"))


def test_exact_balance_can_be_moved():
    repo = _MemoryRepo([_acc(1, OWNER_A, "100.00"), _acc(2, OWNER_A, "0.00")])
    attempt_transfer(repo, OWNER_A, 1, 2, Decimal("100.00"))
    assert repo.accounts[1].balance == Decimal("0")


def test_same_account_rejected():
    repo = _MemoryRepo([_acc(1, OWNER_A, "100.00")])
    with pytest.raises(SameAccount):
        attempt_transfer(repo, OWNER_A, 1, 1, Decimal("10"))
    assert repo.accounts[1].balance == Decimal("100.00")


def test_same_account_with_empty_balance_reports_funds_first():
    repo = _MemoryRepo([_acc(1, OWNER_A, "0.00")])
    with pytest.raises(InsufficientFunds):
        attempt_transfer(repo, OWNER_A, 1, 1, Decimal("10"))


def test_currency_mismatch_rejected_regardless_of_balances():
    repo = _MemoryRepo([_acc(3, OWNER_A, "1000.00", currency="EUR"), _acc(1, OWNER_A, "100.00", currency="USD")])
    with pytest.raises(CurrencyMismatch):
        attempt_transfer(repo, OWNER_A, 3, 1, Decimal("1"))


def test_currency_comparison_is_case_sensitive():
    repo = _MemoryRepo([_acc(1, OWNER_A, "10.00", currency="USD"), _acc(2, OWNER_A, "0.00", currency="usd")])
    with pytest.raises(CurrencyMismatch):
        attempt_transfer(repo, OWNER_A, 1, 2, Decimal("1"))


@pytest.mark.parametrize("amount", ["0", "-5.00"])
def test_non_positive_amount_rejected_when_funds_exist(amount):
    repo = _MemoryRepo([_acc(1, OWNER_A, "10.00"), _acc(2, OWNER_A, "0.00")])
    with pytest.raises(InvalidAmount):
        attempt_transfer(repo, OWNER_A, 1, 2, Decimal(amount))
    assert repo.accounts[1].balance == Decimal("10.00")
    assert repo.accounts[2].balance == Decimal("0.00")


def test_rejection_leaves_no_trace():
    repo = _MemoryRepo([_acc(1, OWNER_A, "10.00"), _acc(2, OWNER_A, "0.00", currency="EUR")])
    with pytest.raises(CurrencyMismatch):
        attempt_transfer(repo, OWNER_A, 1, 2, Decimal("5"))
    assert repo.ledger == []
    assert repo.accounts[1].balance == Decimal("10.00")


def test_accounts_locked_in_ascending_id_order():
    repo = _MemoryRepo([_acc(5, OWNER_A, "10.00"), _acc(2, OWNER_A, "0.00")])
    attempt_transfer(repo, OWNER_A, 5, 2, Decimal("1"))
    assert repo.locked == [2, 5]
