"""Logging module with structured logging and request tracking."""

from dealerdesk.core.logging.config import configure_logging
from dealerdesk.core.logging.middleware import RequestLoggingMiddleware, get_client_ip


__all__ = [
    "RequestLoggingMiddleware",
    "configure_logging",
    "get_client_ip",
]
