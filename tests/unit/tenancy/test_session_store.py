"""Unit tests for tenant session storage and tenant contexts."""

from unittest.mock import AsyncMock
from uuid import uuid4

from dealerdesk.core.tenancy import TenantContext, TenantSessionStore


def make_store() -> tuple[TenantSessionStore, AsyncMock]:
    cache = AsyncMock()
    return TenantSessionStore(cache=cache, ttl_seconds=300), cache


class TestTenantContext:
    def test_session_round_trip(self):
        context = TenantContext(tenant_id=uuid4(), slug="acme", name="Acme Copiers")

        assert TenantContext.from_session(context.to_session()) == context

    def test_session_form_is_json_friendly(self):
        tenant_id = uuid4()
        context = TenantContext(tenant_id=tenant_id, slug="acme")

        assert context.to_session() == {"tenant_id": str(tenant_id), "slug": "acme", "name": None}


class TestTenantSessionStore:
    async def test_save_uses_ttl(self):
        store, cache = make_store()
        context = TenantContext(tenant_id=uuid4(), slug="acme")

        await store.save("abc", context)

        cache.set_json.assert_awaited_once_with("abc", context.to_session(), 300)

    async def test_load_returns_context(self):
        store, cache = make_store()
        context = TenantContext(tenant_id=uuid4(), slug="acme", name="Acme Copiers")
        cache.get_json.return_value = context.to_session()

        assert await store.load("abc") == context
        cache.get_json.assert_awaited_once_with("abc")

    async def test_load_missing_session(self):
        store, cache = make_store()
        cache.get_json.return_value = None

        assert await store.load("abc") is None

    async def test_clear(self):
        store, cache = make_store()
        cache.delete.return_value = True

        assert await store.clear("abc") is True
        cache.delete.assert_awaited_once_with("abc")

    def test_session_ids_are_unique(self):
        assert TenantSessionStore.new_session_id() != TenantSessionStore.new_session_id()
