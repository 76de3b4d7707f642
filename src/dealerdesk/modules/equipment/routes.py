"""Equipment API routes."""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, status

from dealerdesk.core.auth.dependencies import CurrentUser
from dealerdesk.core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from dealerdesk.core.tenancy.guard import CurrentTenant, require_tenant
from dealerdesk.modules.equipment.schemas import equipment_response
from dealerdesk.modules.equipment.services import EquipmentSvc


router = APIRouter(
    prefix="/equipment",
    tags=["equipment"],
    dependencies=[Depends(require_tenant)],
)


@router.get("", summary="List equipment")
async def list_equipment(
    tenant: CurrentTenant,
    _user: CurrentUser,
    service: EquipmentSvc,
    customer_id: Annotated[UUID | None, Query(alias="customerId")] = None,
    status_filter: Annotated[str | None, Query(alias="status")] = None,
    limit: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = DEFAULT_PAGE_SIZE,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> list[dict[str, Any]]:
    items = await service.list_equipment(
        tenant, customer_id=customer_id, status=status_filter, limit=limit, offset=offset
    )
    return [equipment_response(item) for item in items]


@router.get("/{equipment_id}", summary="Get equipment")
async def get_equipment(
    equipment_id: UUID,
    tenant: CurrentTenant,
    _user: CurrentUser,
    service: EquipmentSvc,
) -> dict[str, Any]:
    return equipment_response(await service.get(equipment_id, tenant))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Register equipment")
async def create_equipment(
    payload: Annotated[dict[str, Any], Body()],
    tenant: CurrentTenant,
    user: CurrentUser,
    service: EquipmentSvc,
) -> dict[str, Any]:
    return equipment_response(await service.create(payload, tenant, user.id))


@router.put("/{equipment_id}", summary="Update equipment")
async def update_equipment(
    equipment_id: UUID,
    payload: Annotated[dict[str, Any], Body()],
    tenant: CurrentTenant,
    _user: CurrentUser,
    service: EquipmentSvc,
) -> dict[str, Any]:
    return equipment_response(await service.update(equipment_id, payload, tenant))
