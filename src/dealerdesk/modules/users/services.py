"""User provisioning."""

from uuid import UUID

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from dealerdesk.core.auth.backend import hash_password
from dealerdesk.core.errors import ConflictError
from dealerdesk.modules.users.models import User
from dealerdesk.modules.users.repos import UserRepository
from dealerdesk.modules.users.schemas import UserCreate


logger = structlog.get_logger()


class UserService:
    """Creates users inside a tenant."""

    def __init__(self, db: AsyncSession) -> None:
        self.repo = UserRepository(db)

    async def create_user(self, data: UserCreate, tenant_id: UUID) -> User:
        """Create a user with a hashed password.

        Raises:
            ConflictError: If the email is already taken in this tenant
        """
        if await self.repo.email_exists(data.email, tenant_id):
            raise ConflictError(
                "A user with this email already exists",
                error_code="email_exists",
            )

        user = User(
            email=data.email.lower(),
            full_name=data.full_name,
            password_hash=hash_password(data.password),
            is_active=True,
        )
        user = await self.repo.create(user, tenant_id)
        logger.info("user_created", user_id=str(user.id), tenant_id=str(tenant_id))
        return user
