"""Unit tests for the tenant guard dependency."""

from uuid import uuid4

from fastapi import Depends, FastAPI, Request
from httpx import ASGITransport, AsyncClient

from dealerdesk.core.errors import register_exception_handlers
from dealerdesk.core.tenancy import CurrentTenant, TenantContext, require_tenant


def make_app(context: TenantContext | None) -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.middleware("http")
    async def set_tenant(request: Request, call_next):
        if context is not None:
            request.state.tenant = context
        return await call_next(request)

    @app.get("/guarded", dependencies=[Depends(require_tenant)])
    async def guarded(tenant: CurrentTenant) -> dict[str, str]:
        return {"slug": tenant.slug}

    return app


async def test_guard_passes_resolved_tenant():
    context = TenantContext(tenant_id=uuid4(), slug="acme", name="Acme")

    async with AsyncClient(
        transport=ASGITransport(app=make_app(context)), base_url="http://test"
    ) as client:
        response = await client.get("/guarded")

    assert response.status_code == 200
    assert response.json() == {"slug": "acme"}


async def test_guard_rejects_missing_tenant():
    async with AsyncClient(
        transport=ASGITransport(app=make_app(None)), base_url="http://test"
    ) as client:
        response = await client.get("/guarded")

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "TENANT_REQUIRED"
    assert "tenant context" in body["message"]
