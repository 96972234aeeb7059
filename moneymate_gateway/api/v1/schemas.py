"""Pydantic schemas for API request/response validation"""

import datetime
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from moneymate_gateway.domain.models import (
    BalanceTrend,
    Currency,
    Language,
    MaritalStatus,
    SUPPORTED_TIMEZONES,
    Theme,
    TransactionKind,
)


class TransactionCreate(BaseModel):
    """Request body for POST /v1/transactions"""

    user_id: str = Field(..., min_length=1, description="User identifier")
    type: TransactionKind
    amount: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    category: str = Field(..., min_length=1)
    description: str = ""
    date: Optional[datetime.date] = None


class TransactionResponse(BaseModel):
    id: str
    type: TransactionKind
    amount: float
    category: str
    description: str
    date: datetime.date


class TransactionListResponse(BaseModel):
    user_id: str
    transactions: List[TransactionResponse]


class DebtCreate(BaseModel):
    """Request body for POST /v1/debts"""

    user_id: str = Field(..., min_length=1, description="User identifier")
    amount: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    interest_rate: Decimal = Field(..., ge=0, max_digits=5, decimal_places=2, description="Annual rate in percent")
    minimum_payment: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    description: str = Field(..., min_length=1)
    date: Optional[datetime.date] = None


class DebtResponse(BaseModel):
    id: str
    amount: float
    interest_rate: float
    minimum_payment: float
    description: str
    date: datetime.date


class DebtListResponse(BaseModel):
    user_id: str
    debts: List[DebtResponse]


class OnboardingRequest(BaseModel):
    """Request body for POST /v1/onboarding"""

    user_id: str = Field(..., min_length=1)
    income: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2, description="Monthly income")
    expenses: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2, description="Monthly expenses")
    debt: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2, description="Total outstanding debt")


class OnboardingResponse(BaseModel):
    user_id: str
    transactions: List[TransactionResponse]
    debts: List[DebtResponse]


class SnapshotSchema(BaseModel):
    total_income: float
    total_expenses: float
    balance: float
    savings_rate: float
    expense_breakdown: Dict[str, float]
    dominant_category: Optional[str] = None
    dominant_category_amount: float


class DebtMetricsSchema(BaseModel):
    total_debt: float
    monthly_minimum: float
    available_for_debt: float
    affordable: bool
    payoff_months_estimate: Optional[int] = None


class RecommendationSchema(BaseModel):
    title: str
    description: str
    suggested_action: str


class CategoryInsightSchema(BaseModel):
    category: str
    amount: float
    share: float
    advice: str


class InsightsResponse(BaseModel):
    """Response for GET /v1/insights"""

    user_id: str
    snapshot: SnapshotSchema
    debt_metrics: DebtMetricsSchema
    recommendations: List[RecommendationSchema]
    savings_message: str
    trend: BalanceTrend
    categories: List[CategoryInsightSchema]


class ProfileSchema(BaseModel):
    """Questionnaire answers used to personalise advice"""

    age: Optional[int] = Field(None, ge=0, le=150)
    salary: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    marital_status: Optional[MaritalStatus] = None
    financial_goals: List[str] = Field(default_factory=list)


class ProfileUpdate(ProfileSchema):
    """Request body for PUT /v1/profile"""

    user_id: str = Field(..., min_length=1)


class ProfileResponse(ProfileSchema):
    user_id: str


class SettingsSchema(BaseModel):
    display_name: str = Field("", max_length=100)
    currency: Currency = Currency.USD
    locale: Language = Language.EN
    timezone: str = "UTC"
    theme: Theme = Theme.SYSTEM

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        if value not in SUPPORTED_TIMEZONES:
            raise ValueError(f"Unknown timezone: {value}")
        return value


class SettingsUpdate(SettingsSchema):
    """Request body for PUT /v1/settings"""

    user_id: str = Field(..., min_length=1)


class SettingsResponse(SettingsSchema):
    user_id: str


class AdviceRequest(BaseModel):
    """Request body for POST /v1/advice"""

    user_id: str = Field(..., min_length=1)


class AdviceResponse(BaseModel):
    advice_id: str
    recommendations: str


class AdviceHistoryItem(BaseModel):
    advice_id: str
    recommendations: str
    created_at: str


class AdviceHistoryResponse(BaseModel):
    user_id: str
    advice: List[AdviceHistoryItem]
