"""Per-request tenant context."""

from dataclasses import dataclass
from typing import Any
from uuid import UUID


@dataclass(frozen=True, slots=True)
class TenantContext:
    """The tenant a request is scoped to.

    Set on ``request.state.tenant`` by the resolver and read by the guard.
    """

    tenant_id: UUID
    slug: str
    name: str | None = None

    @classmethod
    def from_tenant(cls, tenant: Any) -> "TenantContext":
        """Build a context from a ``Tenant`` row."""
        return cls(tenant_id=tenant.id, slug=tenant.slug, name=tenant.name)

    def to_session(self) -> dict[str, Any]:
        """Serialize for the session store."""
        return {"tenant_id": str(self.tenant_id), "slug": self.slug, "name": self.name}

    @classmethod
    def from_session(cls, data: dict[str, Any]) -> "TenantContext":
        return cls(
            tenant_id=UUID(data["tenant_id"]),
            slug=data["slug"],
            name=data.get("name"),
        )
