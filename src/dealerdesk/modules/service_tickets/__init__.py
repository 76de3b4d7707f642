"""Service tickets module - service calls against customers and their equipment."""

from dealerdesk.modules.service_tickets.routes import router


__all__ = ["router"]
