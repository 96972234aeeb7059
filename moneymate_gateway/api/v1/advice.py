"""/v1/advice - LLM-generated budgeting advice and its history"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from moneymate_gateway.api.v1.schemas import AdviceHistoryItem, AdviceHistoryResponse, AdviceRequest, AdviceResponse
from moneymate_gateway.api.dependencies import get_advisor_client, get_request_id
from moneymate_gateway.config import settings
from moneymate_gateway.domain.aggregation import compute_snapshot
from moneymate_gateway.domain.exceptions import AdvisorAPIError, ProfileNotFoundError
from moneymate_gateway.domain.prompts import build_advice_prompt
from moneymate_gateway.infrastructure.clients.advisor import AdvisorClient
from moneymate_gateway.infrastructure.database.session import get_db
from moneymate_gateway.infrastructure.database.repositories import (
    AdviceRepository,
    ProfileRepository,
    TransactionRepository,
    to_transaction,
)
from moneymate_gateway.infrastructure.observability.logging import log_advice
from moneymate_gateway.infrastructure.observability.metrics import advice_counter

router = APIRouter()


@router.post("/advice", response_model=AdviceResponse)
async def create_advice(
    request_body: AdviceRequest,
    request: Request,
    db: Session = Depends(get_db),
    advisor_client: AdvisorClient = Depends(get_advisor_client),
):
    """
    Generate personalised advice with the LLM advisor.

    Flow:
    1. Load profile (required) and transactions
    2. Build the prompt from the same aggregates the insights use
    3. Call the advisor once, no retry
    4. Store the reply verbatim and return it
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        profile = ProfileRepository(db).get_profile(request_body.user_id)
        if profile is None:
            raise ProfileNotFoundError(f"No profile for user {request_body.user_id}")

        transactions = [to_transaction(r) for r in TransactionRepository(db).list_by_user(request_body.user_id)]
        snapshot = compute_snapshot(transactions)
        prompt = build_advice_prompt(profile, snapshot, len(transactions))

        text = await advisor_client.generate_advice(prompt)

        record = AdviceRepository(db).save_advice(request_body.user_id, text)
        db.commit()

        advice_counter.labels(outcome="generated").inc()
        log_advice(request_id, request_body.user_id, len(text), (time.time() - start_time) * 1000)

        return AdviceResponse(advice_id=str(record.id), recommendations=text)

    except ProfileNotFoundError as e:
        advice_counter.labels(outcome="no_profile").inc()
        logging.warning(f"Profile missing: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail="Profile not found. Please complete your profile first.")

    except AdvisorAPIError as e:
        advice_counter.labels(outcome="failed").inc()
        db.rollback()
        logging.error(f"Advisor API error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Advice service unavailable")

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/advice/history", response_model=AdviceHistoryResponse)
def get_advice_history(
    user_id: str = Query(..., min_length=1, description="User identifier"),
    db: Session = Depends(get_db),
):
    """Most recent stored advice, newest first"""
    records = AdviceRepository(db).get_advice_by_user(user_id, limit=settings.recent_history_limit)

    return AdviceHistoryResponse(
        user_id=user_id,
        advice=[
            AdviceHistoryItem(
                advice_id=str(r.id),
                recommendations=r.recommendations,
                created_at=r.created_at.isoformat(),
            )
            for r in records
        ],
    )
