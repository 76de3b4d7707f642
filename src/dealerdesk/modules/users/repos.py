"""User repository for database operations."""

from uuid import UUID

from sqlalchemy import func, select

from dealerdesk.core.database.tenant import TenantScopedRepository
from dealerdesk.modules.users.models import User


class UserRepository(TenantScopedRepository[User]):
    """Repository for User database operations.

    Every lookup requires a tenant: an email address identifies a user
    only within one dealer.
    """

    model = User

    async def get_by_email(self, email: str, tenant_id: UUID) -> User | None:
        """Get a user by email address, ignoring case.

        Args:
            email: The user's email
            tenant_id: Tenant the user must belong to

        Returns:
            User if found, None otherwise
        """
        stmt = self.scoped(tenant_id).where(func.lower(User.email) == email.lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def email_exists(self, email: str, tenant_id: UUID) -> bool:
        stmt = select(
            self.scoped(tenant_id).where(func.lower(User.email) == email.lower()).exists()
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())
