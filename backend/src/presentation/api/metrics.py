"""
Prometheus Metrics Endpoint.

Exposes request latency and error counts in the Prometheus text format.

    curl http://localhost:1337/metrics
"""

from fastapi import APIRouter, Response

from src.observability.metrics import get_metrics_content

router = APIRouter(prefix="/metrics", tags=["observability"])


@router.get("")
async def metrics():
    """Prometheus metrics endpoint, scraped periodically."""
    content, content_type = get_metrics_content()
    return Response(content=content, media_type=content_type)
