"""Database layer - session management, base models, and mixins."""

from dealerdesk.core.database.base import Base, TenantMixin, TimestampMixin, UUIDMixin
from dealerdesk.core.database.session import (
    async_engine,
    async_session_factory,
    get_db,
)
from dealerdesk.core.database.tenant import TenantScopedRepository


__all__ = [
    "Base",
    "TenantMixin",
    "TenantScopedRepository",
    "TimestampMixin",
    "UUIDMixin",
    "async_engine",
    "async_session_factory",
    "get_db",
]
