"""GET /v1/insights - aggregated figures and rule-based advice"""

import time
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from moneymate_gateway.api.dependencies import get_request_id
from moneymate_gateway.api.v1.schemas import (
    CategoryInsightSchema,
    DebtMetricsSchema,
    InsightsResponse,
    RecommendationSchema,
    SnapshotSchema,
)
from moneymate_gateway.domain.aggregation import balance_trend, breakdown_shares, compute_debt_metrics, compute_snapshot
from moneymate_gateway.domain.recommendations import category_advice, generate_recommendations, savings_message
from moneymate_gateway.infrastructure.database.session import get_db
from moneymate_gateway.infrastructure.database.repositories import (
    DebtRepository,
    TransactionRepository,
    to_debt,
    to_transaction,
)
from moneymate_gateway.infrastructure.observability.logging import log_insights
from moneymate_gateway.infrastructure.observability.metrics import record_insights

router = APIRouter()


@router.get("/insights", response_model=InsightsResponse)
def get_insights(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    db: Session = Depends(get_db),
):
    """
    Financial health check computed fresh from the user's records.

    Flow:
    1. Load the user's transactions and debts
    2. Compute the snapshot and debt metrics
    3. Evaluate recommendation rules and messaging tables
    """
    start_time = time.time()
    request_id = get_request_id(request)

    transactions = [to_transaction(r) for r in TransactionRepository(db).list_by_user(user_id)]
    debts = [to_debt(r) for r in DebtRepository(db).list_by_user(user_id)]

    snapshot = compute_snapshot(transactions)
    debt_metrics = compute_debt_metrics(debts, snapshot.balance)
    recommendations = generate_recommendations(snapshot, debt_metrics)

    duration_ms = (time.time() - start_time) * 1000
    record_insights(snapshot.balance < 0, recommendations)
    log_insights(request_id, user_id, len(transactions), len(recommendations), duration_ms)

    return InsightsResponse(
        user_id=user_id,
        snapshot=SnapshotSchema(
            total_income=float(snapshot.total_income),
            total_expenses=float(snapshot.total_expenses),
            balance=float(snapshot.balance),
            savings_rate=float(snapshot.savings_rate),
            expense_breakdown={k: float(v) for k, v in snapshot.expense_breakdown.items()},
            dominant_category=snapshot.dominant_category,
            dominant_category_amount=float(snapshot.dominant_category_amount),
        ),
        debt_metrics=DebtMetricsSchema(
            total_debt=float(debt_metrics.total_debt),
            monthly_minimum=float(debt_metrics.monthly_minimum),
            available_for_debt=float(debt_metrics.available_for_debt),
            affordable=debt_metrics.affordable,
            payoff_months_estimate=debt_metrics.payoff_months_estimate,
        ),
        recommendations=[
            RecommendationSchema(
                title=r.title,
                description=r.description,
                suggested_action=r.suggested_action,
            )
            for r in recommendations
        ],
        savings_message=savings_message(snapshot.savings_rate),
        trend=balance_trend(snapshot),
        categories=[
            CategoryInsightSchema(
                category=category,
                amount=float(amount),
                share=float(share),
                advice=category_advice(category, amount, snapshot.total_expenses),
            )
            for category, amount, share in breakdown_shares(snapshot)
        ],
    )
