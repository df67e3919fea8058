"""Observability package for the chat backend."""

from src.observability.metrics import (
    UNMATCHED_ROUTE,
    observe_request_latency,
    increment_error,
    get_metrics_content,
)

__all__ = [
    "UNMATCHED_ROUTE",
    "observe_request_latency",
    "increment_error",
    "get_metrics_content",
]
