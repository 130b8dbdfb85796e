"""Prometheus metrics for the soil advisor."""
from prometheus_client import Counter

ANALYSIS_OUTCOMES = Counter(
    "soil_advisor_analysis_total",
    "Soil analysis requests by outcome.",
    ["outcome"],
)


def record_outcome(outcome: str) -> None:
    """outcome: success | fallback | invalid | rate_limited | upstream_error"""
    ANALYSIS_OUTCOMES.labels(outcome=outcome).inc()
