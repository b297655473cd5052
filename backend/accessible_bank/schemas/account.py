from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime
from decimal import Decimal
from typing import Literal

AccountType = Literal["Regular", "Savings"]

# The frontend posts the enum ordinal.
_TYPE_ORDINALS = {0: "Regular", 1: "Savings"}

class AccountCreate(BaseModel):
    currency: str = "AED"
    type: AccountType = "Regular"

    @field_validator("currency")
    @classmethod
    def currency_normalize(cls, v: str):
        v = (v or "").strip().upper()
        if not v:
            raise ValueError("currency is required")
        if len(v) > 8:
            raise ValueError("currency too long")
        return v

    @field_validator("type", mode="before")
    @classmethod
    def type_normalize(cls, v):
        if isinstance(v, bool):
            return v
        if isinstance(v, int):
            return _TYPE_ORDINALS.get(v, v)
        if isinstance(v, str):
            vv = v.strip()
            if vv.isdigit():
                return _TYPE_ORDINALS.get(int(vv), vv)
            return vv.capitalize()
        return v

class AccountOut(BaseModel):
    id: int
    owner_id: int
    balance: Decimal
    currency: str
    type: AccountType
    created_at: datetime | None = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
