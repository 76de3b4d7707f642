"""Equipment module - devices installed at customers."""

from dealerdesk.modules.equipment.routes import router


__all__ = ["router"]
