"""Report queries."""

from collections.abc import Sequence
from typing import Any
from uuid import UUID

from sqlalchemy import Row, case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from dealerdesk.core.mapping.lifecycle import LEAD
from dealerdesk.modules.business_records.models import BusinessRecord


PIPELINE_STAGE_ORDER = ("new", "contacted", "qualified", "proposal_sent", "negotiating")


class ReportRepository:
    """Aggregate queries over one tenant's business records."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def sales_pipeline(
        self,
        tenant_id: UUID,
        assigned_sales_rep: str | None = None,
    ) -> Sequence[Row[Any]]:
        """Leads per sales stage with count, total estimated amount and average probability.

        Rows come back in pipeline order; unknown stages sort last.
        """
        stage_rank = case(
            {stage: rank for rank, stage in enumerate(PIPELINE_STAGE_ORDER)},
            value=BusinessRecord.sales_stage,
            else_=len(PIPELINE_STAGE_ORDER),
        )
        stmt = (
            select(
                BusinessRecord.sales_stage,
                func.count().label("lead_count"),
                func.coalesce(func.sum(BusinessRecord.estimated_amount), 0).label("total_value"),
                func.avg(BusinessRecord.probability).label("avg_probability"),
            )
            .where(
                BusinessRecord.tenant_id == tenant_id,
                BusinessRecord.record_type == LEAD,
            )
            .group_by(BusinessRecord.sales_stage)
            .order_by(stage_rank, BusinessRecord.sales_stage)
        )
        if assigned_sales_rep is not None:
            stmt = stmt.where(BusinessRecord.assigned_sales_rep == assigned_sales_rep)

        result = await self.session.execute(stmt)
        return result.all()
