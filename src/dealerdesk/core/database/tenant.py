"""Tenant-scoped repository base.

Every repository for a tenant-owned model inherits from
``TenantScopedRepository`` so that reads are always filtered by
``tenant_id`` and inserts always carry the caller's tenant.
"""

from collections.abc import Mapping, Sequence
from typing import Any, ClassVar, Generic, TypeVar
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from dealerdesk.core.constants import DEFAULT_PAGE_SIZE
from dealerdesk.core.database.base import Base


ModelT = TypeVar("ModelT", bound=Base)


class TenantScopedRepository(Generic[ModelT]):
    """Repository with automatic tenant filtering.

    Subclasses set ``model`` to a mapped class that has a ``tenant_id``
    column. Rows belonging to other tenants are invisible: lookups by
    primary key return ``None`` for them instead of the row.

    Usage:
        class EquipmentRepository(TenantScopedRepository[Equipment]):
            model = Equipment
    """

    model: ClassVar[type[Any]]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def scoped(self, tenant_id: UUID) -> Select[Any]:
        """Select statement for the model restricted to one tenant."""
        return select(self.model).where(self.model.tenant_id == tenant_id)

    async def get(self, record_id: UUID, tenant_id: UUID) -> ModelT | None:
        """Get a row by ID within a tenant.

        Args:
            record_id: Primary key of the row
            tenant_id: Tenant the row must belong to

        Returns:
            The row if it exists in this tenant, None otherwise
        """
        stmt = self.scoped(tenant_id).where(self.model.id == record_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_tenant(
        self,
        tenant_id: UUID,
        filters: Mapping[str, Any] | None = None,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> Sequence[ModelT]:
        """List rows for a tenant, newest first.

        Args:
            tenant_id: The tenant's UUID
            filters: Column name to value equality filters; None values are skipped
            limit: Maximum number of rows
            offset: Number of rows to skip

        Returns:
            Matching rows
        """
        stmt = self.scoped(tenant_id)
        for column, value in (filters or {}).items():
            if value is not None:
                stmt = stmt.where(getattr(self.model, column) == value)
        stmt = stmt.order_by(self.model.created_at.desc()).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def create(self, instance: ModelT, tenant_id: UUID) -> ModelT:
        """Insert a row stamped with the given tenant.

        Any tenant_id already present on the instance is overwritten.
        """
        instance.tenant_id = tenant_id  # type: ignore[attr-defined]
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def update(self, instance: ModelT, changes: Mapping[str, Any]) -> ModelT:
        """Apply column changes to a loaded row and flush them."""
        for column, value in changes.items():
            setattr(instance, column, value)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance
