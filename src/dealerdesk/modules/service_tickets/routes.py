"""Service ticket API routes."""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, status

from dealerdesk.core.auth.dependencies import CurrentUser
from dealerdesk.core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from dealerdesk.core.tenancy.guard import CurrentTenant, require_tenant
from dealerdesk.modules.service_tickets.schemas import service_ticket_response
from dealerdesk.modules.service_tickets.services import ServiceTicketSvc


router = APIRouter(
    prefix="/service-tickets",
    tags=["service-tickets"],
    dependencies=[Depends(require_tenant)],
)


@router.get("", summary="List service tickets")
async def list_service_tickets(
    tenant: CurrentTenant,
    _user: CurrentUser,
    service: ServiceTicketSvc,
    customer_id: Annotated[UUID | None, Query(alias="customerId")] = None,
    status_filter: Annotated[str | None, Query(alias="status")] = None,
    limit: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = DEFAULT_PAGE_SIZE,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> list[dict[str, Any]]:
    tickets = await service.list_tickets(
        tenant, customer_id=customer_id, status=status_filter, limit=limit, offset=offset
    )
    return [service_ticket_response(ticket) for ticket in tickets]


@router.get("/{ticket_id}", summary="Get a service ticket")
async def get_service_ticket(
    ticket_id: UUID,
    tenant: CurrentTenant,
    _user: CurrentUser,
    service: ServiceTicketSvc,
) -> dict[str, Any]:
    return service_ticket_response(await service.get(ticket_id, tenant))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Open a service ticket")
async def create_service_ticket(
    payload: Annotated[dict[str, Any], Body()],
    tenant: CurrentTenant,
    user: CurrentUser,
    service: ServiceTicketSvc,
) -> dict[str, Any]:
    return service_ticket_response(await service.create(payload, tenant, user.id))


@router.put("/{ticket_id}", summary="Update a service ticket")
async def update_service_ticket(
    ticket_id: UUID,
    payload: Annotated[dict[str, Any], Body()],
    tenant: CurrentTenant,
    _user: CurrentUser,
    service: ServiceTicketSvc,
) -> dict[str, Any]:
    return service_ticket_response(await service.update(ticket_id, payload, tenant))
