"""POST /v1/onboarding - seed a new user's records from the questionnaire"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from moneymate_gateway.api.v1.schemas import OnboardingRequest, OnboardingResponse
from moneymate_gateway.api.v1.debts import to_debt_response
from moneymate_gateway.api.v1.transactions import to_transaction_response
from moneymate_gateway.domain.onboarding import build_onboarding_entries
from moneymate_gateway.infrastructure.database.session import get_db
from moneymate_gateway.infrastructure.database.repositories import DebtRepository, TransactionRepository

router = APIRouter()


@router.post("/onboarding", response_model=OnboardingResponse, status_code=201)
def complete_onboarding(request_body: OnboardingRequest, db: Session = Depends(get_db)):
    """
    Create starter records in one commit.

    Monthly income becomes a Salary entry, monthly expenses a Bills entry,
    and any debt an "Initial debt" with default card terms.
    """
    transactions, debts = build_onboarding_entries(
        request_body.income,
        request_body.expenses,
        request_body.debt,
    )

    transaction_repo = TransactionRepository(db)
    debt_repo = DebtRepository(db)
    transaction_records = [transaction_repo.create_transaction(request_body.user_id, t) for t in transactions]
    debt_records = [debt_repo.create_debt(request_body.user_id, d) for d in debts]
    db.commit()

    return OnboardingResponse(
        user_id=request_body.user_id,
        transactions=[to_transaction_response(r) for r in transaction_records],
        debts=[to_debt_response(r) for r in debt_records],
    )
