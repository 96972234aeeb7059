"""Pytest fixtures for testing"""

import pytest
from datetime import date, timedelta
from decimal import Decimal
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from moneymate_gateway.api.main import create_app
from moneymate_gateway.infrastructure.database.models import Base
from moneymate_gateway.infrastructure.database.session import get_db
from moneymate_gateway.domain.models import Transaction, TransactionKind


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


def make_transaction(kind: str, amount: str, category: str, days_ago: int = 0, tx_id: str = "") -> Transaction:
    return Transaction(
        id=tx_id or f"{kind}_{category}_{amount}",
        kind=TransactionKind(kind),
        amount=Decimal(amount),
        category=category,
        description="",
        occurred_on=date.today() - timedelta(days=days_ago),
    )


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """One month: salary plus everyday spending"""
    return [
        make_transaction("income", "5000", "Salary", days_ago=30),
        make_transaction("expense", "1200", "Food & Dining", days_ago=20),
        make_transaction("expense", "800", "Shopping", days_ago=10),
    ]
