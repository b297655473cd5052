from decimal import Decimal

from sqlalchemy import Integer, DateTime, func, ForeignKey, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from accessible_bank.db.base import Base

ACCOUNT_TYPES = ("Regular", "Savings")

class Account(Base):
    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    owner_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)

    balance: Mapped[Decimal] = mapped_column(Numeric(18, 2), default=Decimal("0.00"), server_default="0")
    currency: Mapped[str] = mapped_column(String(8), default="AED")
    type: Mapped[str] = mapped_column(String(16), default="Regular", server_default="Regular")

    created_at: Mapped[DateTime] = mapped_column(DateTime, server_default=func.now())

    __table_args__ = (
        UniqueConstraint("owner_id", "currency", "type", name="uq_accounts_owner_currency_type"),
    )
