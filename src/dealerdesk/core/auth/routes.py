"""Authentication API routes.

Sign-in is per tenant: the same email may exist at two dealers, and the
tenant resolved from the host or path decides which account is meant.
"""

import structlog
from fastapi import APIRouter, Depends

from dealerdesk.api.dependencies import DBSession
from dealerdesk.config import settings
from dealerdesk.core.auth.backend import create_access_token, verify_password
from dealerdesk.core.auth.dependencies import CurrentUser
from dealerdesk.core.errors import UnauthorizedError
from dealerdesk.core.tenancy.guard import CurrentTenant, require_tenant
from dealerdesk.modules.users.repos import UserRepository
from dealerdesk.modules.users.schemas import LoginRequest, TokenResponse, UserResponse


logger = structlog.get_logger()

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
    dependencies=[Depends(require_tenant)],
)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login with email and password",
)
async def login(data: LoginRequest, tenant: CurrentTenant, db: DBSession) -> TokenResponse:
    """Exchange credentials for an access token scoped to the current tenant."""
    user = await UserRepository(db).get_by_email(data.email, tenant.tenant_id)

    if not user or not verify_password(data.password, user.password_hash):
        logger.info("login_failed", reason="invalid_credentials")
        raise UnauthorizedError(
            "Invalid email or password",
            error_code="invalid_credentials",
        )

    if not user.is_active:
        raise UnauthorizedError(
            "Account is deactivated",
            error_code="account_inactive",
        )

    logger.info("login_succeeded", user_id=str(user.id))
    return TokenResponse(
        access_token=create_access_token(user_id=user.id, tenant_id=tenant.tenant_id),
        expires_in=settings.access_token_expire_minutes * 60,
    )


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Current user",
)
async def me(user: CurrentUser) -> UserResponse:
    return UserResponse.model_validate(user)
