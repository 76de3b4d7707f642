"""API layer - routing and dependencies."""


def get_api_router():
    """Import router lazily to avoid circular imports."""
    from dealerdesk.api.router import api_router  # noqa: PLC0415

    return api_router


__all__ = ["get_api_router"]
