from datetime import datetime
from decimal import Decimal

from sqlalchemy import Integer, DateTime, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column
from accessible_bank.db.base import Base
from accessible_bank.utils.timezone import utcnow

class Transaction(Base):
    __tablename__ = "transactions"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    from_account_id: Mapped[int] = mapped_column(ForeignKey("accounts.id"), index=True)
    to_account_id: Mapped[int] = mapped_column(ForeignKey("accounts.id"), index=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(18, 2))
    date: Mapped[datetime] = mapped_column(DateTime, default=utcnow, index=True)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    category: Mapped[str | None] = mapped_column(String(50), nullable=True)
