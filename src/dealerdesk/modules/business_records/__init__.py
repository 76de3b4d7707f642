"""Business records module - leads, customers and their activities."""

from dealerdesk.modules.business_records.routes import router


__all__ = ["router"]
