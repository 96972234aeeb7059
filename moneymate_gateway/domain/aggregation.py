"""Aggregation engine - totals, category breakdown and debt affordability"""

import math
from decimal import Decimal
from typing import Dict, List, Sequence, Tuple

from moneymate_gateway.domain.models import (
    BalanceTrend,
    Debt,
    DebtMetrics,
    FinancialSnapshot,
    Transaction,
    TransactionKind,
)

ZERO = Decimal("0")


def compute_snapshot(transactions: Sequence[Transaction]) -> FinancialSnapshot:
    """
    Aggregate one user's transactions into a snapshot.

    Requirements:
    - Income and expense totals (0 for empty input)
    - Savings rate as a ratio of balance to income, 0 when there is no income
    - Sparse expense breakdown by category
    - Dominant category: largest summed amount, ties go to the first category seen

    Input is trusted: amounts and categories are not validated here.
    """
    income = [t for t in transactions if t.kind == TransactionKind.INCOME]
    expenses = [t for t in transactions if t.kind == TransactionKind.EXPENSE]

    total_income = sum((t.amount for t in income), ZERO)
    total_expenses = sum((t.amount for t in expenses), ZERO)
    balance = total_income - total_expenses

    # Avoid division by zero: no income means no savings rate
    savings_rate = balance / total_income if total_income > 0 else ZERO

    # dict preserves first-encountered category order
    expense_breakdown: Dict[str, Decimal] = {}
    for expense in expenses:
        expense_breakdown[expense.category] = expense_breakdown.get(expense.category, ZERO) + expense.amount

    if expense_breakdown:
        # max() keeps the first maximal key on ties
        dominant_category = max(expense_breakdown, key=expense_breakdown.get)
        dominant_amount = expense_breakdown[dominant_category]
    else:
        dominant_category = None
        dominant_amount = ZERO

    return FinancialSnapshot(
        total_income=total_income,
        total_expenses=total_expenses,
        balance=balance,
        savings_rate=savings_rate,
        expense_breakdown=expense_breakdown,
        dominant_category=dominant_category,
        dominant_category_amount=dominant_amount,
    )


def compute_debt_metrics(debts: Sequence[Debt], balance: Decimal) -> DebtMetrics:
    """
    Summarise debts against the money left over each month.

    The payoff estimate divides total principal by the surplus above the
    minimum payments. Accruing interest is ignored, so the figure is only a
    rough order of magnitude.
    """
    total_debt = sum((d.principal for d in debts), ZERO)
    monthly_minimum = sum((d.minimum_payment for d in debts), ZERO)
    available = balance

    payoff_months = None
    if available > monthly_minimum:
        payoff_months = math.ceil(total_debt / (available - monthly_minimum))

    return DebtMetrics(
        total_debt=total_debt,
        monthly_minimum=monthly_minimum,
        available_for_debt=available,
        affordable=available >= monthly_minimum,
        payoff_months_estimate=payoff_months,
    )


def balance_trend(snapshot: FinancialSnapshot) -> BalanceTrend:
    """Trend indicator derived only from the sign of the current balance"""
    return BalanceTrend.INCREASING if snapshot.balance > 0 else BalanceTrend.DECREASING


def breakdown_shares(snapshot: FinancialSnapshot) -> List[Tuple[str, Decimal, Decimal]]:
    """Return (category, amount, share of expenses) sorted by amount, largest first"""
    ranked = sorted(snapshot.expense_breakdown.items(), key=lambda item: item[1], reverse=True)
    return [
        (
            category,
            amount,
            amount / snapshot.total_expenses if snapshot.total_expenses else ZERO,
        )
        for category, amount in ranked
    ]
