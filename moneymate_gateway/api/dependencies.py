"""Dependency injection for FastAPI endpoints"""

import uuid
from fastapi import HTTPException, Request
from moneymate_gateway.infrastructure.clients.advisor import AdvisorClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_advisor_client() -> AdvisorClient:
    """Provide LLM advisor client instance"""
    return AdvisorClient()


def parse_record_id(record_id: str) -> uuid.UUID:
    """Parse a path id, answering 400 for malformed values"""
    try:
        return uuid.UUID(record_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid ID format")
