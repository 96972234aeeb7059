"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from moneymate_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_insights(
    request_id: str,
    user_id: str,
    transaction_count: int,
    recommendation_count: int,
    duration_ms: float,
) -> None:
    """Log structured insight computation for analysis"""
    logging.info(
        "Insights computed",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "insights_complete",
            "transaction_count": transaction_count,
            "recommendation_count": recommendation_count,
            "duration_ms": duration_ms,
        },
    )


def log_advice(request_id: str, user_id: str, advice_chars: int, duration_ms: float) -> None:
    """Log structured LLM advice outcome"""
    logging.info(
        "Advice generated",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "advice_complete",
            "advice_chars": advice_chars,
            "duration_ms": duration_ms,
        },
    )
