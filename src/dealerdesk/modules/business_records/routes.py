"""Business record API routes.

Leads, customers and former customers are views over the same table;
``/leads`` and ``/customers`` are shortcuts over ``/business-records``.
"""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, Response, status

from dealerdesk.core.auth.dependencies import CurrentUser
from dealerdesk.core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from dealerdesk.core.mapping.lifecycle import LEAD
from dealerdesk.core.tenancy.guard import CurrentTenant, require_tenant
from dealerdesk.modules.business_records.schemas import (
    DeactivateRequest,
    StatusTransitions,
    activity_response,
    business_record_response,
)
from dealerdesk.modules.business_records.services import BusinessRecordSvc


router = APIRouter(
    tags=["business-records"],
    dependencies=[Depends(require_tenant)],
)

Limit = Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)]
Offset = Annotated[int, Query(ge=0)]
Payload = Annotated[dict[str, Any], Body()]


# ============================================================
# Business records
# ============================================================


@router.get("/business-records", summary="List leads and customers")
async def list_business_records(
    tenant: CurrentTenant,
    _user: CurrentUser,
    service: BusinessRecordSvc,
    record_type: Annotated[str | None, Query(alias="recordType")] = None,
    status_filter: Annotated[str | None, Query(alias="status")] = None,
    limit: Limit = DEFAULT_PAGE_SIZE,
    offset: Offset = 0,
) -> list[dict[str, Any]]:
    records = await service.list_records(
        tenant, record_type=record_type, status=status_filter, limit=limit, offset=offset
    )
    return [business_record_response(record) for record in records]


@router.get("/business-records/{record_id}", summary="Get a lead or customer")
async def get_business_record(
    record_id: UUID,
    tenant: CurrentTenant,
    _user: CurrentUser,
    service: BusinessRecordSvc,
) -> dict[str, Any]:
    return business_record_response(await service.get(record_id, tenant))


@router.post(
    "/business-records",
    status_code=status.HTTP_201_CREATED,
    summary="Create a lead or customer",
)
async def create_business_record(
    payload: Payload,
    tenant: CurrentTenant,
    user: CurrentUser,
    service: BusinessRecordSvc,
) -> dict[str, Any]:
    record = await service.create(payload, tenant, user.id)
    return business_record_response(record)


@router.put("/business-records/{record_id}", summary="Update a lead or customer")
async def update_business_record(
    record_id: UUID,
    payload: Payload,
    tenant: CurrentTenant,
    user: CurrentUser,
    service: BusinessRecordSvc,
) -> dict[str, Any]:
    record = await service.update(record_id, payload, tenant, user.id)
    return business_record_response(record)


@router.get(
    "/business-records/{record_id}/status-transitions",
    response_model=StatusTransitions,
    summary="Statuses the record may move to next",
)
async def get_status_transitions(
    record_id: UUID,
    tenant: CurrentTenant,
    _user: CurrentUser,
    service: BusinessRecordSvc,
) -> StatusTransitions:
    record, allowed = await service.status_transitions(record_id, tenant)
    return StatusTransitions(record_type=record.record_type, status=record.status, allowed=allowed)


@router.get("/business-records/{record_id}/activities", summary="List activities")
async def list_activities(
    record_id: UUID,
    tenant: CurrentTenant,
    _user: CurrentUser,
    service: BusinessRecordSvc,
    limit: Limit = DEFAULT_PAGE_SIZE,
    offset: Offset = 0,
) -> list[dict[str, Any]]:
    items = await service.list_activities(record_id, tenant, limit=limit, offset=offset)
    return [activity_response(item) for item in items]


@router.post(
    "/business-records/{record_id}/activities",
    status_code=status.HTTP_201_CREATED,
    summary="Log an activity",
)
async def create_activity(
    record_id: UUID,
    payload: Payload,
    tenant: CurrentTenant,
    user: CurrentUser,
    service: BusinessRecordSvc,
) -> dict[str, Any]:
    activity = await service.add_activity(record_id, payload, tenant, user.id)
    return activity_response(activity)


# ============================================================
# Leads
# ============================================================


@router.get("/leads", summary="List leads")
async def list_leads(
    tenant: CurrentTenant,
    _user: CurrentUser,
    service: BusinessRecordSvc,
    status_filter: Annotated[str | None, Query(alias="status")] = None,
    limit: Limit = DEFAULT_PAGE_SIZE,
    offset: Offset = 0,
) -> list[dict[str, Any]]:
    records = await service.list_records(
        tenant, record_type=LEAD, status=status_filter, limit=limit, offset=offset
    )
    return [business_record_response(record) for record in records]


@router.post("/leads", status_code=status.HTTP_201_CREATED, summary="Create a lead")
async def create_lead(
    payload: Payload,
    tenant: CurrentTenant,
    user: CurrentUser,
    service: BusinessRecordSvc,
) -> dict[str, Any]:
    record = await service.create({**payload, "recordType": LEAD}, tenant, user.id)
    return business_record_response(record)


@router.post("/leads/{record_id}/convert", summary="Convert a lead to a customer")
async def convert_lead(
    record_id: UUID,
    tenant: CurrentTenant,
    user: CurrentUser,
    service: BusinessRecordSvc,
    payload: Annotated[dict[str, Any] | None, Body()] = None,
) -> dict[str, Any]:
    record = await service.convert_lead(record_id, tenant, user.id, payload)
    return business_record_response(record)


# ============================================================
# Customers
# ============================================================


@router.get("/customers", summary="List customers")
async def list_customers(
    tenant: CurrentTenant,
    _user: CurrentUser,
    service: BusinessRecordSvc,
    include_inactive: Annotated[bool, Query(alias="includeInactive")] = False,
    limit: Limit = DEFAULT_PAGE_SIZE,
    offset: Offset = 0,
) -> list[dict[str, Any]]:
    records = await service.list_customers(
        tenant, include_inactive=include_inactive, limit=limit, offset=offset
    )
    return [business_record_response(record) for record in records]


@router.get("/customers/{record_id}", summary="Get a customer")
async def get_customer(
    record_id: UUID,
    tenant: CurrentTenant,
    _user: CurrentUser,
    service: BusinessRecordSvc,
) -> dict[str, Any]:
    return business_record_response(await service.get_customer(record_id, tenant))


@router.get("/former-customers", summary="List former customers")
async def list_former_customers(
    tenant: CurrentTenant,
    _user: CurrentUser,
    service: BusinessRecordSvc,
    limit: Limit = DEFAULT_PAGE_SIZE,
    offset: Offset = 0,
) -> list[dict[str, Any]]:
    records = await service.list_former_customers(tenant, limit=limit, offset=offset)
    return [business_record_response(record) for record in records]


@router.post("/customers/{record_id}/deactivate", summary="Deactivate a customer")
async def deactivate_customer(
    record_id: UUID,
    data: DeactivateRequest,
    tenant: CurrentTenant,
    user: CurrentUser,
    service: BusinessRecordSvc,
) -> dict[str, Any]:
    record = await service.deactivate(record_id, data.reason, tenant, user.id)
    return business_record_response(record)


@router.post("/customers/{record_id}/reactivate", summary="Reactivate a customer")
async def reactivate_customer(
    record_id: UUID,
    tenant: CurrentTenant,
    _user: CurrentUser,
    service: BusinessRecordSvc,
) -> dict[str, Any]:
    return business_record_response(await service.reactivate(record_id, tenant))


# ============================================================
# External systems
# ============================================================


@router.get(
    "/business-records/{record_id}/external/{system}",
    summary="Render a record for an external system",
    description="The payload sent to E-Automate (`eautomate`) or Salesforce (`salesforce`).",
)
async def export_business_record(
    record_id: UUID,
    system: str,
    tenant: CurrentTenant,
    _user: CurrentUser,
    service: BusinessRecordSvc,
) -> dict[str, Any]:
    return await service.export_record(record_id, system, tenant)


@router.post(
    "/integrations/eautomate/customers",
    summary="Import a customer from E-Automate",
    description="Creates the customer (201) or refreshes the one with the same `ExternalId` (200).",
)
async def import_eautomate_customer(
    payload: Payload,
    response: Response,
    tenant: CurrentTenant,
    user: CurrentUser,
    service: BusinessRecordSvc,
) -> dict[str, Any]:
    record, created = await service.import_eautomate(payload, tenant, user.id)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return business_record_response(record)
