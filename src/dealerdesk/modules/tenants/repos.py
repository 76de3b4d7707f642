"""Tenant repository for database operations."""

from collections.abc import Sequence
from typing import Literal

from sqlalchemy import case, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from dealerdesk.modules.tenants.models import Tenant


class TenantRepository:
    """Repository for Tenant database operations.

    Tenants are the one table not scoped by tenant_id; this repository is
    used by the resolver, the tenant route and the CLI.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_slug(self, slug: str) -> Tenant | None:
        """Get a tenant by its slug, active or not."""
        result = await self.session.execute(select(Tenant).where(Tenant.slug == slug))
        return result.scalar_one_or_none()

    async def get_by_routing_key(
        self,
        key: str,
        via: Literal["host", "path"],
    ) -> Tenant | None:
        """Get the tenant a host label or path segment names.

        The key matches a slug, or the subdomain prefix (host routing) or
        path prefix (path routing). A slug match wins over a prefix match.

        Args:
            key: Lowercased host label or first path segment
            via: Which part of the request the key came from

        Returns:
            Tenant if found, None otherwise
        """
        prefix = Tenant.subdomain_prefix if via == "host" else Tenant.path_prefix
        stmt = (
            select(Tenant)
            .where(or_(Tenant.slug == key, prefix == key))
            .order_by(case((Tenant.slug == key, 0), else_=1))
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self, include_inactive: bool = True) -> Sequence[Tenant]:
        stmt = select(Tenant).order_by(Tenant.slug)
        if not include_inactive:
            stmt = stmt.where(Tenant.is_active.is_(True))
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def create(self, tenant: Tenant) -> Tenant:
        """Create a new tenant.

        Args:
            tenant: Tenant instance to create

        Returns:
            The created tenant with ID populated
        """
        self.session.add(tenant)
        await self.session.flush()
        await self.session.refresh(tenant)
        return tenant
