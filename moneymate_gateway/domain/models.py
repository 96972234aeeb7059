"""Domain models - pure Python dataclasses representing budgeting entities"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional


class TransactionKind(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class MaritalStatus(str, Enum):
    SINGLE = "single"
    MARRIED = "married"
    DIVORCED = "divorced"
    WIDOWED = "widowed"


class Currency(str, Enum):
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    CAD = "CAD"
    AUD = "AUD"
    CHF = "CHF"
    CNY = "CNY"


class Language(str, Enum):
    EN = "en"
    ES = "es"
    FR = "fr"
    DE = "de"
    IT = "it"
    PT = "pt"
    JA = "ja"
    KO = "ko"
    ZH = "zh"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


SUPPORTED_TIMEZONES = frozenset(
    {
        "UTC",
        "America/New_York",
        "America/Chicago",
        "America/Denver",
        "America/Los_Angeles",
        "Europe/London",
        "Europe/Paris",
        "Europe/Berlin",
        "Asia/Tokyo",
        "Asia/Shanghai",
        "Australia/Sydney",
    }
)


class BalanceTrend(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"


@dataclass
class Transaction:
    """Income or expense entry recorded by a user"""

    id: str
    kind: TransactionKind
    amount: Decimal
    category: str
    description: str
    occurred_on: date


@dataclass
class Debt:
    """Outstanding debt with its minimum monthly payment"""

    id: str
    principal: Decimal
    annual_rate_percent: Decimal
    minimum_payment: Decimal
    description: str
    opened_on: date


@dataclass(frozen=True)
class FinancialSnapshot:
    """Aggregates derived from one user's transactions"""

    total_income: Decimal
    total_expenses: Decimal
    balance: Decimal
    savings_rate: Decimal  # ratio, 0 when there is no income
    expense_breakdown: Dict[str, Decimal]
    dominant_category: Optional[str]
    dominant_category_amount: Decimal


@dataclass(frozen=True)
class DebtMetrics:
    """Debt affordability figures derived from debts and the current balance"""

    total_debt: Decimal
    monthly_minimum: Decimal
    available_for_debt: Decimal
    affordable: bool
    payoff_months_estimate: Optional[int]


@dataclass(frozen=True)
class Recommendation:
    """Single piece of rule-based budgeting advice"""

    title: str
    description: str
    suggested_action: str


@dataclass
class UserProfile:
    """Questionnaire answers used to personalise LLM advice"""

    age: Optional[int]
    salary: Optional[Decimal]
    marital_status: Optional[MaritalStatus]
    financial_goals: List[str] = field(default_factory=list)


@dataclass
class UserSettings:
    """Display preferences for a user"""

    display_name: str = ""
    currency: Currency = Currency.USD
    locale: Language = Language.EN
    timezone: str = "UTC"
    theme: Theme = Theme.SYSTEM
