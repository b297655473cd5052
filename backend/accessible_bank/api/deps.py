from datetime import datetime
from decimal import Decimal

from fastapi import Depends, HTTPException, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from accessible_bank.db.session import SessionLocal
from accessible_bank.core.security import decode_token
from accessible_bank.services.transactions import TxFilters

bearer = HTTPBearer(auto_error=False)

def db():
    s = SessionLocal()
    try:
        yield s
    finally:
        s.close()

def current_user(creds: HTTPAuthorizationCredentials | None = Depends(bearer)) -> dict:
    if creds is None or not creds.credentials:
        raise HTTPException(status_code=401, detail="not_authenticated", headers={"WWW-Authenticate": "Bearer"})
    try:
        claims = decode_token(creds.credentials)
        int(claims["sub"])
    except Exception:
        raise HTTPException(status_code=401, detail="invalid_token", headers={"WWW-Authenticate": "Bearer"})
    return claims

def current_owner_id(u: dict = Depends(current_user)) -> int:
    return int(u["sub"])

def tx_filters(
    min_amount: Decimal | None = Query(None, alias="minAmount"),
    max_amount: Decimal | None = Query(None, alias="maxAmount"),
    date_from: datetime | None = Query(None, alias="dateFrom"),
    date_to: datetime | None = Query(None, alias="dateTo"),
    category: str | None = Query(None),
    description: str | None = Query(None),
) -> TxFilters:
    return TxFilters(
        min_amount=min_amount,
        max_amount=max_amount,
        date_from=date_from,
        date_to=date_to,
        category=category,
        description=description,
    )
