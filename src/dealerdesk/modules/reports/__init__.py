"""Reports module - aggregate views over business records."""

from dealerdesk.modules.reports.routes import router


__all__ = ["router"]
