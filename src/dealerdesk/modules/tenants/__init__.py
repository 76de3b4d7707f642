"""Tenants module - Multi-tenancy support."""

from dealerdesk.modules.tenants.routes import router


__all__ = ["router"]
