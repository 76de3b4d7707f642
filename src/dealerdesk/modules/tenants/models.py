"""Tenant database models."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, validates

from dealerdesk.core.constants import MAX_NAME_LENGTH, MAX_SLUG_LENGTH
from dealerdesk.core.database.base import Base, TimestampMixin, UUIDMixin
from dealerdesk.core.utils.text import is_valid_slug


class Tenant(Base, UUIDMixin, TimestampMixin):
    """A dealer organization using the system.

    All tenant-scoped data references this table via tenant_id. A tenant is
    reachable at ``{slug}.{base-domain}`` and ``/{slug}/``; the optional
    prefixes give it an extra routing key for each of those.
    """

    __tablename__ = "tenants"

    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
        index=True,
    )
    slug: Mapped[str] = mapped_column(
        String(MAX_SLUG_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    subdomain_prefix: Mapped[str | None] = mapped_column(
        String(MAX_SLUG_LENGTH),
        nullable=True,
        unique=True,
    )
    path_prefix: Mapped[str | None] = mapped_column(
        String(MAX_SLUG_LENGTH),
        nullable=True,
        unique=True,
    )
    is_active: Mapped[bool] = mapped_column(
        default=True,
        nullable=False,
    )

    @validates("slug", "subdomain_prefix", "path_prefix")
    def validate_routing_key(self, key: str, value: str | None) -> str | None:
        if value is None and key != "slug":
            return None
        if value is None or not is_valid_slug(value):
            raise ValueError(
                f"{key} must be lowercase letters, digits and hyphens, "
                f"not starting or ending with a hyphen: {value!r}"
            )
        return value

    def __repr__(self) -> str:
        return f"<Tenant(id={self.id}, name={self.name}, slug={self.slug})>"
