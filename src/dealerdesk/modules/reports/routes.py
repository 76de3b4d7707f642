"""Report API routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from dealerdesk.core.auth.dependencies import CurrentUser
from dealerdesk.core.tenancy.guard import CurrentTenant, require_tenant
from dealerdesk.modules.reports.schemas import SalesPipelineReport
from dealerdesk.modules.reports.services import ReportSvc


router = APIRouter(
    prefix="/reports",
    tags=["reports"],
    dependencies=[Depends(require_tenant)],
)


@router.get(
    "/sales-pipeline",
    response_model=SalesPipelineReport,
    summary="Sales pipeline",
    description="Leads grouped by sales stage with count, total estimated value "
    "and average probability.",
)
async def sales_pipeline(
    tenant: CurrentTenant,
    _user: CurrentUser,
    service: ReportSvc,
    assigned_sales_rep: Annotated[str | None, Query(alias="assignedSalesRep")] = None,
) -> SalesPipelineReport:
    return await service.sales_pipeline(tenant, assigned_sales_rep)
