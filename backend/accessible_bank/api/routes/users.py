from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from accessible_bank.api.deps import db, current_owner_id
from accessible_bank.schemas.auth import LoginIn, TokenOut
from accessible_bank.schemas.user import UserCreate, UserOut
from accessible_bank.services import owners

router = APIRouter(prefix="/users", tags=["users"])

@router.post("/register", response_model=UserOut)
def register(body: UserCreate, s: Session = Depends(db)):
    return owners.register(s, body.name, body.email, body.password)

@router.post("/login", response_model=TokenOut)
def login(body: LoginIn, s: Session = Depends(db)):
    return {"token": owners.authenticate(s, body.email, body.password)}

@router.delete("")
def delete_me(s: Session = Depends(db), owner_id: int = Depends(current_owner_id)):
    owners.delete_owner(s, owner_id)
    return {"ok": True}
