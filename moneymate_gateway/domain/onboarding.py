"""Starter records created from the onboarding questionnaire"""

from datetime import date
from decimal import Decimal
from typing import List, Tuple

from moneymate_gateway.domain.models import Debt, Transaction, TransactionKind

DEFAULT_DEBT_RATE_PERCENT = Decimal("18.99")  # typical credit card APR
DEFAULT_MINIMUM_PAYMENT_RATIO = Decimal("0.02")


def build_onboarding_entries(
    monthly_income: Decimal,
    monthly_expenses: Decimal,
    debt: Decimal,
    today: date | None = None,
) -> Tuple[List[Transaction], List[Debt]]:
    """
    Turn the three onboarding figures into starter records.

    Zero figures produce nothing. Returned ids are empty; the store assigns them.
    """
    if today is None:
        today = date.today()

    transactions = []
    if monthly_income > 0:
        transactions.append(
            Transaction(
                id="",
                kind=TransactionKind.INCOME,
                amount=monthly_income,
                category="Salary",
                description="Monthly income",
                occurred_on=today,
            )
        )

    if monthly_expenses > 0:
        transactions.append(
            Transaction(
                id="",
                kind=TransactionKind.EXPENSE,
                amount=monthly_expenses,
                category="Bills",
                description="Monthly expenses",
                occurred_on=today,
            )
        )

    debts = []
    if debt > 0:
        debts.append(
            Debt(
                id="",
                principal=debt,
                annual_rate_percent=DEFAULT_DEBT_RATE_PERCENT,
                minimum_payment=(debt * DEFAULT_MINIMUM_PAYMENT_RATIO).quantize(Decimal("0.01")),
                description="Initial debt",
                opened_on=today,
            )
        )

    return transactions, debts
