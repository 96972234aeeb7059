"""Rule-based budgeting advice - fixed thresholds mapped to canned messages"""

from decimal import Decimal
from typing import Callable, List, Optional, Tuple

from moneymate_gateway.domain.models import DebtMetrics, FinancialSnapshot, Recommendation

SAVINGS_TARGET = Decimal("0.20")
DOMINANT_CATEGORY_LIMIT = Decimal("0.40")

Rule = Callable[[FinancialSnapshot, Optional[DebtMetrics]], Optional[Recommendation]]


def _overspending(snapshot: FinancialSnapshot, debt: Optional[DebtMetrics]) -> Optional[Recommendation]:
    if snapshot.balance < 0:
        return Recommendation(
            title="Address Overspending",
            description="You're spending more than you earn",
            suggested_action="Focus on reducing expenses or increasing income",
        )
    return None


def _low_savings(snapshot: FinancialSnapshot, debt: Optional[DebtMetrics]) -> Optional[Recommendation]:
    if snapshot.savings_rate < SAVINGS_TARGET:
        return Recommendation(
            title="Boost Your Savings",
            description="Aim to save 20% of your income for financial security",
            suggested_action="Set up automatic transfers to a savings account",
        )
    return None


def _dominant_category(snapshot: FinancialSnapshot, debt: Optional[DebtMetrics]) -> Optional[Recommendation]:
    if snapshot.dominant_category_amount > DOMINANT_CATEGORY_LIMIT * snapshot.total_expenses:
        share = (
            snapshot.dominant_category_amount / snapshot.total_expenses * 100
            if snapshot.total_expenses
            else Decimal("100")
        )
        return Recommendation(
            title="Optimize Your Biggest Expense",
            description=f"{snapshot.dominant_category} is taking up {share:.1f}% of your spending",
            suggested_action="Look for ways to reduce this category",
        )
    return None


def _unaffordable_debt(snapshot: FinancialSnapshot, debt: Optional[DebtMetrics]) -> Optional[Recommendation]:
    if debt is not None and debt.total_debt > 0 and not debt.affordable:
        shortfall = debt.monthly_minimum - debt.available_for_debt
        return Recommendation(
            title="Debt Needs Attention",
            description="Your available funds are insufficient for debt payments",
            suggested_action=f"Find an additional ${shortfall:,.2f}/month by increasing income or reducing expenses",
        )
    return None


def _debt_payoff(snapshot: FinancialSnapshot, debt: Optional[DebtMetrics]) -> Optional[Recommendation]:
    if debt is not None and debt.total_debt > 0 and debt.payoff_months_estimate is not None:
        extra = debt.available_for_debt - debt.monthly_minimum
        return Recommendation(
            title="Accelerate Debt Payoff",
            description=f"You could be debt-free in about {debt.payoff_months_estimate} months",
            suggested_action=f"Put the extra ${extra:,.2f}/month toward your debts",
        )
    return None


# Evaluated in order; overspending is listed first as the most urgent
RULES: Tuple[Rule, ...] = (
    _overspending,
    _low_savings,
    _dominant_category,
    _unaffordable_debt,
    _debt_payoff,
)

WELL_BALANCED = Recommendation(
    title="You're Doing Great!",
    description="Your finances are well-balanced",
    suggested_action="Consider investing your extra savings",
)


def generate_recommendations(
    snapshot: FinancialSnapshot,
    debt_metrics: Optional[DebtMetrics] = None,
) -> List[Recommendation]:
    """
    Evaluate every rule against the snapshot and return those that fire.

    Rules are independent predicates, not a ranking: several can match at
    once. When none match a single positive recommendation is returned, so
    the result is never empty.
    """
    recommendations = []
    for rule in RULES:
        recommendation = rule(snapshot, debt_metrics)
        if recommendation is not None:
            recommendations.append(recommendation)

    return recommendations or [WELL_BALANCED]


def savings_message(savings_rate: Decimal) -> str:
    """Headline for the savings rate (ratio, not percent)"""
    if savings_rate >= Decimal("0.30"):
        return "You're a savings superstar!"
    elif savings_rate >= Decimal("0.20"):
        return "Great job with your savings!"
    elif savings_rate >= Decimal("0.10"):
        return "You're on the right track!"
    elif savings_rate >= 0:
        return "You're breaking even - let's improve!"
    else:
        return "Let's get you back on track!"


# category -> (share of total expenses that triggers the tip, tip)
CATEGORY_TIPS = {
    "Food & Dining": (Decimal("0.30"), "Consider meal prepping to cut dining costs!"),
    "Transportation": (Decimal("0.25"), "Look into carpooling or public transport options!"),
    "Shopping": (Decimal("0.20"), "Try the 24-hour rule before making purchases!"),
    "Entertainment": (Decimal("0.15"), "Explore free activities in your area!"),
}

WELL_MANAGED_TIP = "This category looks well-managed!"


def category_advice(category: str, amount: Decimal, total_expenses: Decimal) -> str:
    """Tip for one category of the expense breakdown"""
    if category not in CATEGORY_TIPS or not total_expenses:
        return WELL_MANAGED_TIP

    threshold, tip = CATEGORY_TIPS[category]
    if amount / total_expenses > threshold:
        return tip
    return WELL_MANAGED_TIP
