"""User database models."""

from sqlalchemy import Boolean, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dealerdesk.core.constants import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH
from dealerdesk.core.database.base import Base, TenantMixin, TimestampMixin, UUIDMixin
from dealerdesk.modules.tenants.models import Tenant


class User(Base, UUIDMixin, TimestampMixin, TenantMixin):
    """A dealer employee who can sign in to one tenant.

    Attributes:
        email: Email address, unique within the tenant
        password_hash: Bcrypt hash of the password
        full_name: Display name
        is_active: Whether the user can sign in
    """

    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("tenant_id", "email", name="uq_users_tenant_email"),)

    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    full_name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
    )

    tenant: Mapped[Tenant] = relationship(
        Tenant,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, tenant_id={self.tenant_id})>"
