"""Tests for request metrics labels and structured log context."""

import io
import json
import logging
from uuid import uuid4

import pytest
import structlog

from tour_catalog.core.observability import REGISTRY, build_log_formatter


def _request_endpoint_labels():
    return {
        sample.labels["endpoint"]
        for metric in REGISTRY.collect()
        for sample in metric.samples
        if sample.name == "http_requests_total"
    }


@pytest.mark.asyncio
async def test_request_metrics_use_route_template(test_client):
    """Test requests for distinct tour ids share one endpoint label."""
    tour_ids = [str(uuid4()) for _ in range(5)]
    for tour_id in tour_ids:
        response = await test_client.get(f"/v1/tour/{tour_id}")
        assert response.status_code == 404

    labels = _request_endpoint_labels()

    assert any(label.endswith("/{tour_id}") for label in labels)
    assert not any(tour_id in label for label in labels for tour_id in tour_ids)


@pytest.mark.asyncio
async def test_unrouted_requests_share_one_label(test_client):
    """Test paths matching no route are not recorded verbatim."""
    await test_client.get(f"/nowhere/{uuid4()}")

    labels = _request_endpoint_labels()

    assert "unmatched" in labels
    assert not any(label.startswith("/nowhere/") for label in labels)


def test_log_formatter_renders_bound_context_and_extra():
    """Test stdlib records carry structlog context variables and extra fields."""
    formatter = build_log_formatter(json_output=True)
    record = logging.LogRecord(
        name="tour_catalog.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Tour created successfully",
        args=(),
        exc_info=None,
    )
    record.title = "Alps Trek"

    structlog.contextvars.bind_contextvars(request_id="req-123")
    try:
        line = json.loads(formatter.format(record))
    finally:
        structlog.contextvars.clear_contextvars()

    assert line["event"] == "Tour created successfully"
    assert line["request_id"] == "req-123"
    assert line["title"] == "Alps Trek"
    assert line["level"] == "info"
    assert line["logger"] == "tour_catalog.test"


@pytest.mark.asyncio
async def test_request_id_reaches_service_logs(test_client, sample_tour_data):
    """Test log lines from the service carry the request id of the call."""
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(build_log_formatter(json_output=True))
    service_logger = logging.getLogger("tour_catalog.services.tour_service")
    previous_level = service_logger.level
    service_logger.addHandler(handler)
    service_logger.setLevel(logging.INFO)

    try:
        response = await test_client.post(
            "/v1/tour/create",
            json=sample_tour_data,
            headers={"X-Request-ID": "req-abc"},
        )
    finally:
        service_logger.removeHandler(handler)
        service_logger.setLevel(previous_level)

    assert response.status_code == 201
    lines = [json.loads(line) for line in stream.getvalue().splitlines()]
    created = [line for line in lines if line["event"] == "Tour created successfully"]
    assert len(created) == 1
    assert created[0]["request_id"] == "req-abc"
    assert created[0]["title"] == "Alps Trek"
