"""Tests for health check endpoints."""

from unittest.mock import AsyncMock

from httpx import AsyncClient

from dealerdesk.config import settings


async def test_liveness_endpoint(client: AsyncClient):
    """Test that liveness endpoint returns 200."""
    response = await client.get("/health/live")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "alive"


async def test_readiness_endpoint(client: AsyncClient):
    """Test that readiness endpoint returns 200 with healthy checks."""
    response = await client.get("/health/ready")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["checks"] == {"database": "ok"}


async def test_readiness_reports_unreachable_redis(client: AsyncClient, monkeypatch):
    """A failing Redis ping makes the service not ready."""
    monkeypatch.setattr(settings, "tenant_session_enabled", True)
    monkeypatch.setattr(
        "dealerdesk.api.router.ping_redis",
        AsyncMock(side_effect=ConnectionError("refused")),
    )

    response = await client.get("/health/ready")

    assert response.status_code == 503
    data = response.json()
    assert data["status"] == "degraded"
    assert data["checks"] == {"database": "ok", "redis": "unavailable"}


async def test_health_needs_no_tenant(bare_client: AsyncClient):
    """Health checks answer on the bare domain and on unknown tenants alike."""
    assert (await bare_client.get("/health/live")).status_code == 200

    response = await bare_client.get(
        "/health/live", headers={"Host": "no-such-dealer.app.example"}
    )
    assert response.status_code == 200


async def test_info_endpoint(client: AsyncClient):
    """Test that info endpoint returns application metadata."""
    response = await client.get("/info")

    assert response.status_code == 200
    data = response.json()
    assert data["app"] == settings.app_name
    assert data["environment"] == "test"
    assert "version" in data


async def test_request_id_is_echoed(client: AsyncClient):
    response = await client.get("/health/live", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


async def test_request_id_is_generated(client: AsyncClient):
    response = await client.get("/health/live")

    assert response.headers["X-Request-ID"]
