"""Observability module for tracing.

Provides OpenTelemetry integration for distributed tracing.
"""

from dealerdesk.core.observability.tracing import (
    get_tracer,
    setup_tracing,
    shutdown_tracing,
)


__all__ = ["get_tracer", "setup_tracing", "shutdown_tracing"]
