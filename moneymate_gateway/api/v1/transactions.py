"""/v1/transactions - record, list and delete income and expense entries"""

from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from moneymate_gateway.api.dependencies import parse_record_id
from moneymate_gateway.api.v1.schemas import TransactionCreate, TransactionListResponse, TransactionResponse
from moneymate_gateway.domain.exceptions import RecordNotFoundError
from moneymate_gateway.domain.models import Transaction
from moneymate_gateway.infrastructure.database.models import TransactionRecord
from moneymate_gateway.infrastructure.database.session import get_db
from moneymate_gateway.infrastructure.database.repositories import TransactionRepository

router = APIRouter()


def to_transaction_response(record: TransactionRecord) -> TransactionResponse:
    return TransactionResponse(
        id=str(record.id),
        type=record.type,
        amount=float(record.amount),
        category=record.category,
        description=record.description or "",
        date=record.date,
    )


@router.post("/transactions", response_model=TransactionResponse, status_code=201)
def create_transaction(request_body: TransactionCreate, db: Session = Depends(get_db)):
    """Record a single income or expense entry"""
    transaction = Transaction(
        id="",
        kind=request_body.type,
        amount=request_body.amount,
        category=request_body.category,
        description=request_body.description,
        occurred_on=request_body.date or date.today(),
    )
    record = TransactionRepository(db).create_transaction(request_body.user_id, transaction)
    db.commit()
    return to_transaction_response(record)


@router.get("/transactions", response_model=TransactionListResponse)
def list_transactions(
    user_id: str = Query(..., min_length=1, description="User identifier"),
    db: Session = Depends(get_db),
):
    """All of a user's transactions, newest first"""
    records = TransactionRepository(db).list_by_user(user_id)
    return TransactionListResponse(
        user_id=user_id,
        transactions=[to_transaction_response(r) for r in records],
    )


@router.delete("/transactions/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: str,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    db: Session = Depends(get_db),
):
    """Delete a transaction; other users' rows are reported as not found"""
    transaction_uuid = parse_record_id(transaction_id)
    try:
        TransactionRepository(db).delete_transaction(user_id, transaction_uuid)
    except RecordNotFoundError:
        db.rollback()
        raise HTTPException(status_code=404, detail="Transaction not found")
    db.commit()
