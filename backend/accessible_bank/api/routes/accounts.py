from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from accessible_bank.api.deps import db, current_owner_id
from accessible_bank.schemas.account import AccountCreate, AccountOut
from accessible_bank.services import accounts as account_service

router = APIRouter(prefix="/accounts", tags=["accounts"])

@router.post("", response_model=AccountOut)
def create_account(body: AccountCreate, s: Session = Depends(db), owner_id: int = Depends(current_owner_id)):
    return account_service.create_account(s, owner_id, body.currency, body.type)

@router.get("", response_model=list[AccountOut])
def list_accounts(s: Session = Depends(db), owner_id: int = Depends(current_owner_id)):
    return account_service.list_accounts(s, owner_id)

@router.get("/{account_id}", response_model=AccountOut)
def get_account(account_id: int, s: Session = Depends(db), owner_id: int = Depends(current_owner_id)):
    return account_service.get_account(s, owner_id, account_id)
