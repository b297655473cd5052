import os
from decimal import Decimal

from sqlalchemy import select
from accessible_bank.db.session import SessionLocal
from accessible_bank.models.account import Account
from accessible_bank.models.user import User
from accessible_bank.core.security import hash_password

def main():
    email = os.environ.get("SEED_EMAIL", "demo@example.com").strip().lower()
    password = os.environ.get("SEED_PASSWORD", "demo123")
    name = os.environ.get("SEED_NAME", "Demo Owner")
    opening = Decimal(os.environ.get("SEED_OPENING_BALANCE", "1000.00"))

    db = SessionLocal()
    try:
        existing = db.execute(select(User).where(User.email == email)).scalar_one_or_none()
        if existing:
            return
        user = User(name=name, email=email, password_hash=hash_password(password))
        db.add(user)
        db.flush()
        db.add(Account(owner_id=user.id, currency="USD", type="Regular", balance=opening))
        db.add(Account(owner_id=user.id, currency="USD", type="Savings", balance=Decimal("0.00")))
        db.commit()
    finally:
        db.close()

if __name__ == "__main__":
    main()
