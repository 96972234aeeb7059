"""Prometheus metrics for insight requests, advice generation and HTTP latency"""

from typing import Iterable
from prometheus_client import Counter, Histogram

from moneymate_gateway.domain.models import Recommendation

# Insight metrics
insights_counter = Counter(
    "moneymate_insights_total",
    "Insight snapshots served",
    ["balance"],  # positive | negative
)

recommendation_counter = Counter(
    "moneymate_recommendation_total",
    "Rule-based recommendations fired",
    ["title"],
)

# Advisor metrics
advice_counter = Counter(
    "moneymate_advice_total",
    "LLM advice requests",
    ["outcome"],  # generated | failed | no_profile
)

advisor_latency_histogram = Histogram(
    "advisor_latency_seconds",
    "LLM advisor response time",
    buckets=[0.5, 1.0, 2.5, 5.0, 10.0, 20.0, 30.0],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_insights(balance_negative: bool, recommendations: Iterable[Recommendation]) -> None:
    """Record which rules fired so advice distribution can be monitored"""
    insights_counter.labels(balance="negative" if balance_negative else "positive").inc()
    for recommendation in recommendations:
        recommendation_counter.labels(title=recommendation.title).inc()
