"""
Prometheus Metrics for the chat backend.

DATA FLOW:
    This file                  presentation/api/metrics.py         Scraper
    ─────────                  ────────────────────────────         ───────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus / Alloy

METRIC TYPES:
    - Histogram: request latency per method, route and status (for P95)
    - Counter: domain errors by exception type
"""

from prometheus_client import (
    Counter,
    Histogram,
    generate_latest,
    CONTENT_TYPE_LATEST,
)

# Requests that matched no route share one label value
UNMATCHED_ROUTE = "unmatched"


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2, 5],  # in seconds
)

ERRORS_TOTAL = Counter(
    "chat_errors_total",
    "Total number of domain errors returned to clients, by type",
    ["error_type"],
)


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    """Call to record request latency. Integration point: fastapi_app.RequestMetricsMiddleware"""
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def increment_error(error_type: str):
    """Call to record a domain error. Integration point: fastapi_app domain exception handler"""
    ERRORS_TOTAL.labels(error_type=error_type).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


__all__ = [
    "UNMATCHED_ROUTE",
    "observe_request_latency",
    "increment_error",
    "get_metrics_content",
]
