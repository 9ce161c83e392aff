from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from marketplace.data.database import get_db
from marketplace.services.account_service import AccountService
from marketplace.domain.schemas import Credentials, ErrorOut, SuccessOut, LoginOut

router = APIRouter(prefix="/api/auth", tags=["auth"])

@router.post("/register", response_model=SuccessOut, responses={400: {"model": ErrorOut}})
def register(payload: Credentials, db: Session = Depends(get_db)):
    AccountService(db).register(payload.username, payload.password)
    return SuccessOut()

@router.post("/login", response_model=LoginOut, responses={401: {"model": ErrorOut}})
def login(payload: Credentials, db: Session = Depends(get_db)):
    user = AccountService(db).login(payload.username, payload.password)
    return LoginOut(user=user)
