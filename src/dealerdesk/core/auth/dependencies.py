"""FastAPI dependencies for authentication.

A token is only honoured on the tenant it was issued for: the tenant in
the token must match the tenant the request resolved to.
"""

from typing import TYPE_CHECKING, Annotated, Any

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from dealerdesk.api.dependencies import DBSession
from dealerdesk.core.auth.backend import decode_token
from dealerdesk.core.auth.schemas import TokenData
from dealerdesk.core.errors import ForbiddenError, UnauthorizedError
from dealerdesk.core.tenancy.guard import CurrentTenant


if TYPE_CHECKING:
    from dealerdesk.modules.users.models import User


bearer_scheme = HTTPBearer(auto_error=False)


async def get_token_data(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> TokenData:
    """Extract and validate token data from the Authorization header.

    Raises:
        UnauthorizedError: If token is missing or invalid
    """
    if not credentials:
        raise UnauthorizedError(
            "Missing authentication token",
            error_code="missing_token",
        )

    token_data = decode_token(credentials.credentials)
    if not token_data:
        raise UnauthorizedError(
            "Invalid or expired token",
            error_code="invalid_token",
        )

    if token_data.type != "access":
        raise UnauthorizedError(
            "Invalid token type",
            error_code="invalid_token_type",
        )

    return token_data


async def get_current_user(
    request: Request,
    token_data: Annotated[TokenData, Depends(get_token_data)],
    tenant: CurrentTenant,
    db: DBSession,
) -> "User":
    """Get the authenticated user of the resolved tenant.

    Raises:
        ForbiddenError: If the token belongs to another tenant or the user is inactive
        UnauthorizedError: If the user no longer exists
    """
    from dealerdesk.modules.users.repos import UserRepository  # noqa: PLC0415

    if token_data.tenant_id != tenant.tenant_id:
        raise ForbiddenError(
            "Token was issued for a different tenant",
            error_code="tenant_mismatch",
        )

    user = await UserRepository(db).get(token_data.user_id, tenant.tenant_id)

    if not user:
        raise UnauthorizedError(
            "User not found",
            error_code="user_not_found",
        )

    if not user.is_active:
        raise ForbiddenError(
            "User account is deactivated",
            error_code="user_inactive",
        )

    request.state.user_id = user.id
    return user


# Use Any for User type to avoid circular imports at runtime
CurrentUser = Annotated[Any, Depends(get_current_user)]
