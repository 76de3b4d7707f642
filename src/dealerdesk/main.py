"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dealerdesk import __version__
from dealerdesk.api import get_api_router
from dealerdesk.config import settings
from dealerdesk.core.auth.middleware import RequestIdMiddleware
from dealerdesk.core.cache import close_redis_pool
from dealerdesk.core.database import async_engine
from dealerdesk.core.errors import register_exception_handlers
from dealerdesk.core.logging import RequestLoggingMiddleware, configure_logging
from dealerdesk.core.observability import setup_tracing, shutdown_tracing
from dealerdesk.core.tenancy import TenantDirectory, TenantResolverMiddleware, TenantSessionStore


configure_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Handles startup and shutdown events.
    """
    logger.info(
        "application_startup",
        app_name=settings.app_name,
        environment=settings.environment,
        base_domains=settings.tenant_base_domains,
        path_routing=settings.tenant_path_routing_enabled,
    )

    yield

    logger.info("application_shutdown")

    # Flush pending spans
    shutdown_tracing()
    logger.info("tracing_shutdown")

    await close_redis_pool()
    logger.info("redis_pool_closed")


def create_app(
    tenant_directory: TenantDirectory | None = None,
    session_store: TenantSessionStore | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        tenant_directory: Tenant lookup for the resolver; defaults to one
            backed by the application database
        session_store: Tenant session store; defaults to Redis when
            ``TENANT_SESSION_ENABLED`` is set, otherwise sessions are off

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title=settings.app_name,
        description="Multi-tenant CRM back end for copier and printer dealers",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
        # Disable docs in production
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_url="/openapi.json" if not settings.is_production else None,
    )

    if session_store is None and settings.tenant_session_enabled:
        session_store = TenantSessionStore()
    app.state.tenant_session_store = session_store

    # Middleware added first runs innermost: the resolver sees the request
    # after the request id is set, and the logger wraps everything.
    app.add_middleware(
        TenantResolverMiddleware,
        directory=tenant_directory or TenantDirectory(),
        session_store=session_store,
    )
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    cors_origins = settings.cors_origins
    if settings.is_development and not cors_origins:
        cors_origins = ["http://localhost:3000", "http://localhost:5173"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    )

    # Register exception handlers for RFC 7807 error responses
    register_exception_handlers(app)

    app.include_router(get_api_router())

    setup_tracing(app, async_engine)

    return app
