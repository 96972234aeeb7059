"""Database engine and per-request sessions"""

from typing import Any, Dict
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from moneymate_gateway.config import Settings, settings


def engine_options(config: Settings) -> Dict[str, Any]:
    """
    Keyword arguments for create_engine.

    SQLite (local runs and tests) gets a thread-shareable connection and
    no pool sizing; Postgres gets the pool configured in Settings.
    """
    if config.database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,
        "pool_size": config.db_pool_size,
        "max_overflow": config.db_max_overflow,
        "pool_recycle": config.db_pool_recycle_seconds,
    }


engine = create_engine(settings.database_url, **engine_options(settings))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Dependency injection for database sessions"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
