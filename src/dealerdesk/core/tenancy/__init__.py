"""Tenant resolution, guarding, and per-session tenant memory."""

from dealerdesk.core.tenancy.context import TenantContext
from dealerdesk.core.tenancy.directory import TenantDirectory
from dealerdesk.core.tenancy.guard import CurrentTenant, require_tenant
from dealerdesk.core.tenancy.resolver import (
    TenantResolverMiddleware,
    extract_host_slug,
    extract_path_slug,
)
from dealerdesk.core.tenancy.session_store import TenantSessionStore


__all__ = [
    "CurrentTenant",
    "TenantContext",
    "TenantDirectory",
    "TenantResolverMiddleware",
    "TenantSessionStore",
    "extract_host_slug",
    "extract_path_slug",
    "require_tenant",
]
