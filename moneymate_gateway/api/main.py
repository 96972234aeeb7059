"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from moneymate_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from moneymate_gateway.api.v1 import advice, debts, insights, onboarding, profile, transactions
from moneymate_gateway.infrastructure.observability.logging import setup_logging
from moneymate_gateway.config import settings

setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="MoneyMate Gateway",
        description="Budget tracking, insights and advice service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Last added = first executed
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(transactions.router, prefix="/v1", tags=["transactions"])
    app.include_router(debts.router, prefix="/v1", tags=["debts"])
    app.include_router(onboarding.router, prefix="/v1", tags=["onboarding"])
    app.include_router(insights.router, prefix="/v1", tags=["insights"])
    app.include_router(profile.router, prefix="/v1", tags=["profile"])
    app.include_router(advice.router, prefix="/v1", tags=["advice"])

    return app


app = create_app()
