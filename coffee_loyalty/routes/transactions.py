from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from coffee_loyalty.db import get_db
from coffee_loyalty.schemas.transaction import TransactionCreate, TransactionDetailOut, TransactionOut
from coffee_loyalty.services.filters import parse_transaction_filter
from coffee_loyalty.services.ledger_service import record_purchase
from coffee_loyalty.services.transaction_service import list_transactions


router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.post("", response_model=TransactionOut)
def add_transaction(payload: TransactionCreate, db: Session = Depends(get_db)):
    return record_purchase(
        db,
        member_id=payload.member_id,
        product_id=payload.product_id,
        quantity=payload.quantity,
    )


@router.get("", response_model=list[TransactionDetailOut])
def get_transactions(filter: str | None = None, db: Session = Depends(get_db)):
    return list_transactions(db, parse_transaction_filter(filter))
