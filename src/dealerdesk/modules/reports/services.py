"""Report service."""

from typing import Annotated

from fastapi import Depends

from dealerdesk.api.dependencies import DBSession
from dealerdesk.core.tenancy.context import TenantContext
from dealerdesk.modules.reports.repos import ReportRepository
from dealerdesk.modules.reports.schemas import PipelineStage, SalesPipelineReport


class ReportService:
    def __init__(self, db: DBSession) -> None:
        self.repo = ReportRepository(db)

    async def sales_pipeline(
        self,
        tenant: TenantContext,
        assigned_sales_rep: str | None = None,
    ) -> SalesPipelineReport:
        rows = await self.repo.sales_pipeline(tenant.tenant_id, assigned_sales_rep)
        stages = [
            PipelineStage(
                sales_stage=row.sales_stage,
                count=row.lead_count,
                total_value=float(row.total_value or 0),
                avg_probability=None if row.avg_probability is None else float(row.avg_probability),
            )
            for row in rows
        ]
        return SalesPipelineReport(
            stages=stages,
            total_count=sum(stage.count for stage in stages),
            total_value=sum(stage.total_value for stage in stages),
            assigned_sales_rep=assigned_sales_rep,
        )


ReportSvc = Annotated[ReportService, Depends(ReportService)]
