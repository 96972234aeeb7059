"""Data access layer for budgeting entities

Every query is filtered by user_id so one user can never read or delete
another user's rows.
"""

import uuid
from typing import List, Optional
from sqlalchemy.orm import Session
from moneymate_gateway.infrastructure.database.models import (
    AdviceRecord,
    DebtRecord,
    ProfileRecord,
    TransactionRecord,
)
from moneymate_gateway.domain.exceptions import RecordNotFoundError
from moneymate_gateway.domain.models import (
    Currency,
    Debt,
    Language,
    MaritalStatus,
    Theme,
    Transaction,
    TransactionKind,
    UserProfile,
    UserSettings,
)


def to_transaction(record: TransactionRecord) -> Transaction:
    return Transaction(
        id=str(record.id),
        kind=TransactionKind(record.type),
        amount=record.amount,
        category=record.category,
        description=record.description or "",
        occurred_on=record.date,
    )


def to_debt(record: DebtRecord) -> Debt:
    return Debt(
        id=str(record.id),
        principal=record.amount,
        annual_rate_percent=record.interest_rate,
        minimum_payment=record.minimum_payment,
        description=record.description,
        opened_on=record.date,
    )


class TransactionRepository:
    """Repository for income and expense entries"""

    def __init__(self, db: Session):
        self.db = db

    def create_transaction(self, user_id: str, transaction: Transaction) -> TransactionRecord:
        db_transaction = TransactionRecord(
            user_id=user_id,
            type=transaction.kind.value,
            amount=transaction.amount,
            category=transaction.category,
            description=transaction.description,
            date=transaction.occurred_on,
        )
        self.db.add(db_transaction)
        self.db.flush()
        return db_transaction

    def list_by_user(self, user_id: str) -> List[TransactionRecord]:
        """Fetch all of a user's transactions, newest first"""
        return (
            self.db.query(TransactionRecord)
            .filter(TransactionRecord.user_id == user_id)
            .order_by(TransactionRecord.date.desc(), TransactionRecord.created_at.desc())
            .all()
        )

    def delete_transaction(self, user_id: str, transaction_id: uuid.UUID) -> None:
        """
        Raises:
            RecordNotFoundError: No such transaction for this user
        """
        deleted = (
            self.db.query(TransactionRecord)
            .filter(TransactionRecord.id == transaction_id, TransactionRecord.user_id == user_id)
            .delete(synchronize_session=False)
        )
        if not deleted:
            raise RecordNotFoundError(f"Transaction {transaction_id} not found")


class DebtRepository:
    """Repository for debts"""

    def __init__(self, db: Session):
        self.db = db

    def create_debt(self, user_id: str, debt: Debt) -> DebtRecord:
        db_debt = DebtRecord(
            user_id=user_id,
            amount=debt.principal,
            interest_rate=debt.annual_rate_percent,
            minimum_payment=debt.minimum_payment,
            description=debt.description,
            date=debt.opened_on,
        )
        self.db.add(db_debt)
        self.db.flush()
        return db_debt

    def list_by_user(self, user_id: str) -> List[DebtRecord]:
        """Fetch all of a user's debts, newest first"""
        return (
            self.db.query(DebtRecord)
            .filter(DebtRecord.user_id == user_id)
            .order_by(DebtRecord.date.desc(), DebtRecord.created_at.desc())
            .all()
        )

    def delete_debt(self, user_id: str, debt_id: uuid.UUID) -> None:
        """
        Raises:
            RecordNotFoundError: No such debt for this user
        """
        deleted = (
            self.db.query(DebtRecord)
            .filter(DebtRecord.id == debt_id, DebtRecord.user_id == user_id)
            .delete(synchronize_session=False)
        )
        if not deleted:
            raise RecordNotFoundError(f"Debt {debt_id} not found")


class ProfileRepository:
    """Repository for the per-user profile row (questionnaire + settings)"""

    def __init__(self, db: Session):
        self.db = db

    def _get_record(self, user_id: str) -> Optional[ProfileRecord]:
        return self.db.query(ProfileRecord).filter(ProfileRecord.user_id == user_id).first()

    def _get_or_create(self, user_id: str) -> ProfileRecord:
        record = self._get_record(user_id)
        if record is None:
            record = ProfileRecord(user_id=user_id)
            self.db.add(record)
        return record

    def get_profile(self, user_id: str) -> Optional[UserProfile]:
        """Questionnaire answers, or None if the user never filled them in"""
        record = self._get_record(user_id)
        if record is None or (
            record.age is None
            and record.salary is None
            and record.marital_status is None
            and not record.financial_goals
        ):
            return None
        return UserProfile(
            age=record.age,
            salary=record.salary,
            marital_status=MaritalStatus(record.marital_status) if record.marital_status else None,
            financial_goals=list(record.financial_goals or []),
        )

    def save_profile(self, user_id: str, profile: UserProfile) -> UserProfile:
        record = self._get_or_create(user_id)
        record.age = profile.age
        record.salary = profile.salary
        record.marital_status = profile.marital_status.value if profile.marital_status else None
        record.financial_goals = list(profile.financial_goals)
        self.db.flush()
        return profile

    def get_settings(self, user_id: str) -> UserSettings:
        """Stored settings, falling back to defaults for users without a row"""
        record = self._get_record(user_id)
        if record is None:
            return UserSettings()
        return UserSettings(
            display_name=record.display_name or "",
            currency=Currency(record.currency or Currency.USD.value),
            locale=Language(record.language or Language.EN.value),
            timezone=record.timezone or "UTC",
            theme=Theme(record.theme or Theme.SYSTEM.value),
        )

    def save_settings(self, user_id: str, user_settings: UserSettings) -> UserSettings:
        record = self._get_or_create(user_id)
        record.display_name = user_settings.display_name
        record.currency = user_settings.currency.value
        record.language = user_settings.locale.value
        record.timezone = user_settings.timezone
        record.theme = user_settings.theme.value
        self.db.flush()
        return user_settings


class AdviceRepository:
    """Repository for stored LLM advice"""

    def __init__(self, db: Session):
        self.db = db

    def save_advice(self, user_id: str, text: str) -> AdviceRecord:
        db_advice = AdviceRecord(user_id=user_id, recommendations=text)
        self.db.add(db_advice)
        self.db.flush()
        return db_advice

    def get_advice_by_user(self, user_id: str, limit: int = 10) -> List[AdviceRecord]:
        """Fetch recent advice for a user"""
        return (
            self.db.query(AdviceRecord)
            .filter(AdviceRecord.user_id == user_id)
            .order_by(AdviceRecord.created_at.desc())
            .limit(limit)
            .all()
        )
