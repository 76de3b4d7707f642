"""Tenant-scoped CRM back end for copier and printer dealers."""

__version__ = "0.1.0"
