"""Declarative base and the column mixins shared by dealer data."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, ForeignKey, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class UUIDMixin:
    id: Mapped[UUID] = mapped_column(
        primary_key=True,
        default=uuid4,
        index=True,
    )


class TimestampMixin:
    """``created_at`` and ``updated_at``, both set by the database."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class TenantMixin:
    """Owning dealer of a row.

    Every table a dealer's users can read carries this column, and every
    query against such a table filters on it (see ``TenantScopedRepository``).
    Deleting a tenant deletes its rows.
    """

    tenant_id: Mapped[UUID] = mapped_column(
        ForeignKey("tenants.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )


class CreatedByMixin:
    """Id of the signed-in user who created the row.

    Not a foreign key: rows outlive the users who created them.
    """

    created_by: Mapped[UUID | None] = mapped_column(Uuid)
