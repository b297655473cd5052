from __future__ import annotations

import logging

from sqlalchemy import delete, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from accessible_bank.core.errors import EmailTaken, InvalidCredentials, OwnerNotFound
from accessible_bank.core.security import create_access_token, hash_password, verify_password
from accessible_bank.models.account import Account
from accessible_bank.models.transaction import Transaction
from accessible_bank.models.user import User

logger = logging.getLogger(__name__)


def register(s: Session, name: str, email: str, password: str) -> User:
    exists = s.execute(select(User.id).where(User.email == email)).first()
    if exists:
        raise EmailTaken()
    user = User(name=name, email=email, password_hash=hash_password(password))
    s.add(user)
    try:
        s.commit()
    except IntegrityError:
        s.rollback()
        raise EmailTaken()
    s.refresh(user)
    logger.info("owner registered: id=%s", user.id)
    return user


def authenticate(s: Session, email: str, password: str) -> str:
    """Return a bearer token for valid credentials.

    Unknown email and wrong password raise the same ``InvalidCredentials``.
    """
    u = s.execute(select(User).where(User.email == email)).scalar_one_or_none()
    if not u or not verify_password(password, u.password_hash):
        logger.warning("login failed for %s", email)
        raise InvalidCredentials()
    return create_access_token(owner_id=u.id, email=u.email)


def delete_owner(s: Session, owner_id: int) -> None:
    """Remove an owner, their accounts and every transaction touching them.

    The three deletes go out in one commit; nothing relies on FK cascades.
    """
    user = s.execute(select(User).where(User.id == owner_id)).scalar_one_or_none()
    if user is None:
        raise OwnerNotFound()

    account_ids = list(s.execute(select(Account.id).where(Account.owner_id == owner_id)).scalars().all())
    try:
        if account_ids:
            s.execute(
                delete(Transaction).where(
                    or_(
                        Transaction.from_account_id.in_(account_ids),
                        Transaction.to_account_id.in_(account_ids),
                    )
                )
            )
            s.execute(delete(Account).where(Account.id.in_(account_ids)))
        s.delete(user)
        s.commit()
    except Exception:
        s.rollback()
        raise
    logger.info("owner deleted: id=%s accounts=%s", owner_id, len(account_ids))
