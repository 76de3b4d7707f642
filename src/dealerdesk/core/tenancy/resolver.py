"""Tenant resolution middleware.

Works out which tenant a request belongs to from its host
(``acme.app.example``) or, failing that, its first path segment
(``/acme/...``). A request that names a tenant which does not exist or
is inactive is answered with 404 here and never reaches a route.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from dealerdesk.config import settings
from dealerdesk.core.constants import RESERVED_HOST_LABELS, RESERVED_PATH_PREFIXES
from dealerdesk.core.errors import AppException, TenantNotFoundError, problem_response
from dealerdesk.core.tenancy.context import TenantContext
from dealerdesk.core.tenancy.directory import RoutingMethod, TenantDirectory
from dealerdesk.core.tenancy.session_store import TenantSessionStore
from dealerdesk.core.utils.text import path_has_prefix


if TYPE_CHECKING:
    from starlette.types import ASGIApp


logger = structlog.get_logger()

DEFAULT_EXCLUDE_PATHS = (
    "/health",
    "/docs",
    "/redoc",
    "/openapi.json",
    "/info",
    "/favicon.ico",
)


def extract_host_slug(host: str | None, base_domains: Iterable[str]) -> str | None:
    """Return the tenant slug carried by a Host header, if any.

    The host must be a subdomain of one of ``base_domains``; only its
    leftmost label is used, and reserved labels never name a tenant.

    Examples:
        >>> extract_host_slug("acme.app.example:8000", ["app.example"])
        'acme'
        >>> extract_host_slug("www.app.example", ["app.example"]) is None
        True
    """
    if not host or host.startswith("["):
        return None

    hostname = host.rsplit(":", 1)[0] if ":" in host else host
    hostname = hostname.strip().lower().rstrip(".")

    for domain in base_domains:
        suffix = f".{domain}"
        if hostname.endswith(suffix):
            label = hostname[: -len(suffix)].split(".")[0]
            if label and label not in RESERVED_HOST_LABELS:
                return label
            return None
    return None


def extract_path_slug(path: str) -> tuple[str, str] | None:
    """Split a tenant slug off the front of a path.

    Returns ``(slug, remaining_path)``, or None when the first segment is
    empty or a reserved route prefix.

    Examples:
        >>> extract_path_slug("/acme/api/v1/business-records")
        ('acme', '/api/v1/business-records')
        >>> extract_path_slug("/api/v1/business-records") is None
        True
    """
    segment, _, rest = path.lstrip("/").partition("/")
    if not segment or segment.lower() in RESERVED_PATH_PREFIXES:
        return None
    return segment.lower(), f"/{rest}"


class TenantResolverMiddleware(BaseHTTPMiddleware):
    """Attach a ``TenantContext`` to ``request.state.tenant``.

    Requests with no tenant in host or path are passed on unresolved,
    unless their session remembers a tenant. Routes that need a tenant
    reject them through ``require_tenant``.

    Args:
        app: The ASGI application
        directory: Tenant lookup
        session_store: Optional store remembering tenants per session cookie
        base_domains: Domains whose subdomains name tenants
        path_routing: Whether ``/{slug}/...`` paths name tenants
        exclude_paths: Path prefixes that never resolve a tenant
    """

    def __init__(
        self,
        app: "ASGIApp",
        directory: TenantDirectory | None = None,
        session_store: TenantSessionStore | None = None,
        base_domains: Iterable[str] | None = None,
        path_routing: bool | None = None,
        exclude_paths: Iterable[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.directory = directory or TenantDirectory()
        self.session_store = session_store
        self.base_domains = tuple(
            settings.tenant_base_domains if base_domains is None else base_domains
        )
        self.path_routing = (
            settings.tenant_path_routing_enabled if path_routing is None else path_routing
        )
        self.exclude_paths = tuple(exclude_paths or DEFAULT_EXCLUDE_PATHS)
        self.cookie_name = settings.session_cookie_name

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        root_path = request.scope.get("root_path", "")
        path = request.scope["path"]
        if root_path and path.startswith(root_path):
            path = path[len(root_path) :]

        if path_has_prefix(path, self.exclude_paths):
            return await call_next(request)

        slug: str | None = extract_host_slug(request.headers.get("host"), self.base_domains)
        via: RoutingMethod = "host"
        if slug is None and self.path_routing:
            split = extract_path_slug(path)
            if split is not None:
                slug = split[0]
                via = "path"

        session_id = request.cookies.get(self.cookie_name)

        if slug is None:
            context = await self._restore(session_id)
            if context is None:
                return await call_next(request)
            request.state.tenant = context
            with structlog.contextvars.bound_contextvars(
                tenant_id=str(context.tenant_id), tenant_slug=context.slug
            ):
                return await call_next(request)

        try:
            tenant = await self.directory.get_by_routing_key(slug, via)
        except TimeoutError:
            logger.warning("tenant_lookup_timeout", slug=slug, via=via)
            return problem_response(request, TenantNotFoundError(slug))
        except Exception:
            logger.exception("tenant_lookup_failed", slug=slug, via=via)
            return problem_response(request, AppException())

        if tenant is None or not tenant.is_active:
            logger.info(
                "tenant_not_found",
                slug=slug,
                via=via,
                inactive=tenant is not None,
            )
            return problem_response(request, TenantNotFoundError(slug))

        context = TenantContext.from_tenant(tenant)
        request.state.tenant = context

        if via == "path":
            # Routes match on the path below root_path
            request.scope["root_path"] = f"{root_path}/{slug}"

        new_session_id = await self._remember(session_id, context)

        with structlog.contextvars.bound_contextvars(
            tenant_id=str(context.tenant_id), tenant_slug=context.slug
        ):
            logger.debug("tenant_resolved", via=via)
            response = await call_next(request)

        if new_session_id is not None:
            response.set_cookie(
                self.cookie_name,
                new_session_id,
                max_age=self.session_store.ttl_seconds if self.session_store else None,
                httponly=True,
                samesite="lax",
                secure=settings.is_production,
            )
        return response

    async def _restore(self, session_id: str | None) -> TenantContext | None:
        if self.session_store is None or not session_id:
            return None
        try:
            return await self.session_store.load(session_id)
        except Exception as exc:
            logger.warning("tenant_session_load_failed", error=str(exc))
            return None

    async def _remember(self, session_id: str | None, context: TenantContext) -> str | None:
        """Store the context for the session; returns a session id to set as cookie."""
        if self.session_store is None:
            return None
        new_session_id = None
        if not session_id:
            session_id = new_session_id = self.session_store.new_session_id()
        try:
            await self.session_store.save(session_id, context)
        except Exception as exc:
            logger.warning("tenant_session_save_failed", error=str(exc))
            return None
        return new_session_id
