"""Business record repositories."""

from collections.abc import Collection, Sequence
from uuid import UUID

from dealerdesk.core.constants import DEFAULT_PAGE_SIZE
from dealerdesk.core.database.tenant import TenantScopedRepository
from dealerdesk.core.mapping.lifecycle import CUSTOMER
from dealerdesk.modules.business_records.models import BusinessRecord, BusinessRecordActivity


class BusinessRecordRepository(TenantScopedRepository[BusinessRecord]):
    """Tenant-scoped access to leads and customers."""

    model = BusinessRecord

    async def list_customers(
        self,
        tenant_id: UUID,
        include_statuses: Collection[str] | None = None,
        exclude_statuses: Collection[str] | None = None,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> Sequence[BusinessRecord]:
        """List customers, optionally restricted by status.

        Args:
            tenant_id: The tenant's UUID
            include_statuses: Only these statuses, if given
            exclude_statuses: Never these statuses, if given
            limit: Maximum number of rows
            offset: Number of rows to skip
        """
        stmt = self.scoped(tenant_id).where(BusinessRecord.record_type == CUSTOMER)
        if include_statuses:
            stmt = stmt.where(BusinessRecord.status.in_(include_statuses))
        if exclude_statuses:
            stmt = stmt.where(BusinessRecord.status.not_in(exclude_statuses))
        stmt = stmt.order_by(BusinessRecord.company_name).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def get_by_external_id(
        self, tenant_id: UUID, external_system_id: str, external_customer_id: str
    ) -> BusinessRecord | None:
        stmt = self.scoped(tenant_id).where(
            BusinessRecord.external_system_id == external_system_id,
            BusinessRecord.external_customer_id == external_customer_id,
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()


class ActivityRepository(TenantScopedRepository[BusinessRecordActivity]):
    """Tenant-scoped access to business record activities."""

    model = BusinessRecordActivity

    async def list_for_record(
        self,
        business_record_id: UUID,
        tenant_id: UUID,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> Sequence[BusinessRecordActivity]:
        return await self.list_for_tenant(
            tenant_id,
            filters={"business_record_id": business_record_id},
            limit=limit,
            offset=offset,
        )
