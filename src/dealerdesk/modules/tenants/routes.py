"""Tenant API routes."""

from fastapi import APIRouter, Request, Response

from dealerdesk.config import settings
from dealerdesk.core.tenancy.guard import CurrentTenant
from dealerdesk.core.tenancy.session_store import TenantSessionStore
from dealerdesk.modules.tenants.schemas import SessionClearedResponse, TenantResponse
from dealerdesk.modules.tenants.urls import tenant_urls


router = APIRouter(prefix="/tenant", tags=["tenants"])


@router.get(
    "",
    response_model=TenantResponse,
    summary="Current tenant",
    description="The tenant this request resolved to, with the URLs it is reachable at.",
)
async def get_current_tenant(tenant: CurrentTenant) -> TenantResponse:
    return TenantResponse(
        id=tenant.tenant_id,
        name=tenant.name,
        slug=tenant.slug,
        urls=tenant_urls(
            tenant.slug,
            settings.primary_base_domain,
            settings.tenant_path_routing_enabled,
        ),
    )


@router.delete(
    "/session",
    response_model=SessionClearedResponse,
    summary="Forget the remembered tenant",
)
async def clear_tenant_session(request: Request, response: Response) -> SessionClearedResponse:
    """Drop the tenant remembered for this session and expire its cookie."""
    session_id = request.cookies.get(settings.session_cookie_name)
    store: TenantSessionStore | None = getattr(request.app.state, "tenant_session_store", None)

    cleared = False
    if session_id and store is not None:
        cleared = await store.clear(session_id)

    response.delete_cookie(settings.session_cookie_name)
    return SessionClearedResponse(cleared=cleared)
