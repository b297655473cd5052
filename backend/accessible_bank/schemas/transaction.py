from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")
# Largest magnitude a NUMERIC(18, 2) column holds is below this.
AMOUNT_LIMIT = Decimal("1e16")

class TxCreate(BaseModel):
    from_account_id: int
    to_account_id: int
    amount: Decimal
    description: str | None = None
    category: str | None = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @field_validator("amount")
    @classmethod
    def amount_must_be_finite(cls, v: Decimal):
        if v is None:
            raise ValueError("amount is required")
        if not v.is_finite():
            raise ValueError("amount must be finite")
        # Bounded before quantize, which fails past the context precision.
        if abs(v) >= AMOUNT_LIMIT:
            raise ValueError("amount too large")
        v = v.quantize(CENT, rounding=ROUND_HALF_UP)
        if abs(v) >= AMOUNT_LIMIT:
            raise ValueError("amount too large")
        return v

    @field_validator("description")
    @classmethod
    def description_trim(cls, v: str | None):
        if v is None:
            return None
        v = v.strip()
        if len(v) > 255:
            raise ValueError("description too long")
        return v or None

    @field_validator("category")
    @classmethod
    def category_trim(cls, v: str | None):
        if v is None:
            return None
        v = v.strip()
        if len(v) > 50:
            raise ValueError("category too long")
        return v or None

class TxOut(BaseModel):
    id: int
    from_account_id: int
    to_account_id: int
    amount: Decimal
    date: datetime
    description: str | None
    category: str | None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
