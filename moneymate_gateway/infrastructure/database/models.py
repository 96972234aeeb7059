"""SQLAlchemy ORM models for per-user budgeting data"""

import uuid
import datetime
from sqlalchemy import Column, String, Date, DateTime, Integer, Numeric, Text, JSON
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class TransactionRecord(Base):
    """Income or expense entry"""

    __tablename__ = "transactions"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    type = Column(String(16), nullable=False)  # income | expense
    amount = Column(Numeric(10, 2), nullable=False)
    category = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    date = Column(Date, nullable=False, default=datetime.date.today)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class DebtRecord(Base):
    """Outstanding debt"""

    __tablename__ = "debts"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    interest_rate = Column(Numeric(5, 2), nullable=False)
    minimum_payment = Column(Numeric(10, 2), nullable=False)
    description = Column(Text, nullable=False)
    date = Column(Date, nullable=False, default=datetime.date.today)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class ProfileRecord(Base):
    """Questionnaire answers and display settings, one row per user"""

    __tablename__ = "profiles"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, unique=True, index=True)
    age = Column(Integer, nullable=True)
    salary = Column(Numeric(12, 2), nullable=True)
    marital_status = Column(Text, nullable=True)
    financial_goals = Column(JSON, nullable=True)
    display_name = Column(Text, nullable=True)
    currency = Column(Text, nullable=False, default="USD")
    language = Column(Text, nullable=False, default="en")
    timezone = Column(Text, nullable=False, default="UTC")
    theme = Column(Text, nullable=False, default="system")
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())


class AdviceRecord(Base):
    """LLM advice text stored verbatim"""

    __tablename__ = "ai_recommendations"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    recommendations = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
