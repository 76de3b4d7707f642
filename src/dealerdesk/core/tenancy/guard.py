"""Tenant guard dependency."""

from typing import Annotated

from fastapi import Depends, Request

from dealerdesk.core.errors import TenantRequiredError
from dealerdesk.core.tenancy.context import TenantContext


async def require_tenant(request: Request) -> TenantContext:
    """Return the resolved tenant or fail the request with 400.

    Attach to every router that touches tenant data:

        router = APIRouter(dependencies=[Depends(require_tenant)])
    """
    tenant = getattr(request.state, "tenant", None)
    if tenant is None:
        raise TenantRequiredError()
    return tenant


CurrentTenant = Annotated[TenantContext, Depends(require_tenant)]
