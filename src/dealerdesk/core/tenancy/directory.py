"""Tenant directory used by the resolver.

The resolver runs before any route dependency, so it cannot use the
request's database session. The directory opens its own short-lived
session for each lookup and bounds the lookup with a timeout.
"""

import asyncio
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Literal

from sqlalchemy.ext.asyncio import AsyncSession

from dealerdesk.config import settings
from dealerdesk.core.database.session import async_session_factory


if TYPE_CHECKING:
    from dealerdesk.modules.tenants.models import Tenant


RoutingMethod = Literal["host", "path"]
SessionProvider = Callable[[], AbstractAsyncContextManager[AsyncSession]]


class TenantDirectory:
    """Looks tenants up by routing key.

    Args:
        session_provider: Callable returning an async context manager that
            yields a session, such as an ``async_sessionmaker``
        timeout: Seconds before a lookup is abandoned
    """

    def __init__(
        self,
        session_provider: SessionProvider = async_session_factory,
        timeout: float | None = None,
    ) -> None:
        self.session_provider = session_provider
        self.timeout = settings.tenant_lookup_timeout_seconds if timeout is None else timeout

    async def get_by_routing_key(self, key: str, via: RoutingMethod) -> "Tenant | None":
        """Find the tenant for a slug or prefix, active or not.

        Raises:
            TimeoutError: If the lookup takes longer than ``timeout``
        """
        return await asyncio.wait_for(self._lookup(key, via), timeout=self.timeout)

    async def _lookup(self, key: str, via: RoutingMethod) -> "Tenant | None":
        from dealerdesk.modules.tenants.repos import TenantRepository  # noqa: PLC0415

        async with self.session_provider() as session:
            return await TenantRepository(session).get_by_routing_key(key, via)
