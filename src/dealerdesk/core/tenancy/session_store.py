"""Server-side tenant session storage.

Remembers which tenant a browser session resolved to, so later requests
on the same session need not carry the slug in their host or path.
"""

import secrets

from dealerdesk.config import settings
from dealerdesk.core.cache.redis import RedisCache
from dealerdesk.core.constants import TENANT_SESSION_PREFIX
from dealerdesk.core.tenancy.context import TenantContext


class TenantSessionStore:
    """Tenant contexts in Redis, keyed by session id."""

    def __init__(
        self,
        cache: RedisCache | None = None,
        ttl_seconds: int | None = None,
    ) -> None:
        self.cache = cache or RedisCache(prefix=TENANT_SESSION_PREFIX)
        self.ttl_seconds = ttl_seconds or settings.tenant_session_ttl_seconds

    @staticmethod
    def new_session_id() -> str:
        return secrets.token_urlsafe(32)

    async def save(self, session_id: str, context: TenantContext) -> None:
        await self.cache.set_json(session_id, context.to_session(), self.ttl_seconds)

    async def load(self, session_id: str) -> TenantContext | None:
        data = await self.cache.get_json(session_id)
        if not data:
            return None
        return TenantContext.from_session(data)

    async def clear(self, session_id: str) -> bool:
        """Forget a session. Returns False if nothing was stored."""
        return await self.cache.delete(session_id)
