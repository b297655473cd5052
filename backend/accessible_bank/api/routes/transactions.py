from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlalchemy.orm import Session

from accessible_bank.api.deps import db, current_owner_id, tx_filters
from accessible_bank.core.config import settings
from accessible_bank.schemas.transaction import TxCreate, TxOut
from accessible_bank.services.exports import export_transactions
from accessible_bank.services.repository import SqlLedgerRepository
from accessible_bank.services.transactions import TxFilters, list_transactions
from accessible_bank.services.transfers import attempt_transfer

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.post("", response_model=TxOut)
def create_transaction(body: TxCreate, s: Session = Depends(db), owner_id: int = Depends(current_owner_id)):
    return attempt_transfer(
        SqlLedgerRepository(s),
        owner_id,
        body.from_account_id,
        body.to_account_id,
        body.amount,
        description=body.description,
        category=body.category,
    )


@router.get("/my", response_model=list[TxOut])
def my_transactions(
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=settings.max_page_size, alias="pageSize"),
    f: TxFilters = Depends(tx_filters),
    s: Session = Depends(db),
    owner_id: int = Depends(current_owner_id),
):
    return list_transactions(s, owner_id, f, page=page, page_size=page_size)


@router.get("/export")
def export(
    format: str = Query("csv"),
    f: TxFilters = Depends(tx_filters),
    s: Session = Depends(db),
    owner_id: int = Depends(current_owner_id),
):
    out = export_transactions(s, owner_id, f, format)
    return Response(
        content=out.content,
        media_type=out.media_type,
        headers={"Content-Disposition": f'attachment; filename="{out.filename}"'},
    )
