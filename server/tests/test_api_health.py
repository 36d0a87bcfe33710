"""Simple API health tests without database."""

import pytest
from httpx import ASGITransport, AsyncClient

from tour_catalog.main import create_app


@pytest.mark.asyncio
async def test_api_health_endpoints():
    """Test the endpoints that do not need a database session."""
    app = create_app()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

        response = await client.get("/info")
        assert response.status_code == 200
        data = response.json()
        assert "service" in data
        assert "version" in data


@pytest.mark.asyncio
async def test_request_id_is_echoed():
    """Test the request ID middleware echoes a caller-supplied ID."""
    app = create_app()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/info", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"


@pytest.mark.asyncio
async def test_openapi_docs():
    """Test that OpenAPI docs are available in development."""
    app = create_app()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/docs")
        assert response.status_code == 200
