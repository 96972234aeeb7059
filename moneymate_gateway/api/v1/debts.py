"""/v1/debts - record, list and delete debts"""

from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from moneymate_gateway.api.dependencies import parse_record_id
from moneymate_gateway.api.v1.schemas import DebtCreate, DebtListResponse, DebtResponse
from moneymate_gateway.domain.exceptions import RecordNotFoundError
from moneymate_gateway.domain.models import Debt
from moneymate_gateway.infrastructure.database.models import DebtRecord
from moneymate_gateway.infrastructure.database.session import get_db
from moneymate_gateway.infrastructure.database.repositories import DebtRepository

router = APIRouter()


def to_debt_response(record: DebtRecord) -> DebtResponse:
    return DebtResponse(
        id=str(record.id),
        amount=float(record.amount),
        interest_rate=float(record.interest_rate),
        minimum_payment=float(record.minimum_payment),
        description=record.description,
        date=record.date,
    )


@router.post("/debts", response_model=DebtResponse, status_code=201)
def create_debt(request_body: DebtCreate, db: Session = Depends(get_db)):
    debt = Debt(
        id="",
        principal=request_body.amount,
        annual_rate_percent=request_body.interest_rate,
        minimum_payment=request_body.minimum_payment,
        description=request_body.description,
        opened_on=request_body.date or date.today(),
    )
    record = DebtRepository(db).create_debt(request_body.user_id, debt)
    db.commit()
    return to_debt_response(record)


@router.get("/debts", response_model=DebtListResponse)
def list_debts(
    user_id: str = Query(..., min_length=1, description="User identifier"),
    db: Session = Depends(get_db),
):
    records = DebtRepository(db).list_by_user(user_id)
    return DebtListResponse(user_id=user_id, debts=[to_debt_response(r) for r in records])


@router.delete("/debts/{debt_id}", status_code=204)
def delete_debt(
    debt_id: str,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    db: Session = Depends(get_db),
):
    debt_uuid = parse_record_id(debt_id)
    try:
        DebtRepository(db).delete_debt(user_id, debt_uuid)
    except RecordNotFoundError:
        db.rollback()
        raise HTTPException(status_code=404, detail="Debt not found")
    db.commit()
