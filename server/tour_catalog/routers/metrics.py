"""Metrics endpoint for Prometheus scraping."""

from fastapi import APIRouter, Response

from ..core.observability import get_prometheus_metrics

router = APIRouter()


@router.get(
    "/metrics",
    summary="Prometheus Metrics",
    description="Request and tour operation counters in Prometheus text format",
    response_class=Response,
    tags=["Observability"]
)
async def metrics():
    """Return the service registry in Prometheus exposition format."""
    return Response(
        content=get_prometheus_metrics(),
        media_type="text/plain; version=0.0.4; charset=utf-8"
    )
