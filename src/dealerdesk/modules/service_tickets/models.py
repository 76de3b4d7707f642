"""Service ticket database models."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from dealerdesk.core.constants import MAX_CODE_LENGTH, MAX_NAME_LENGTH
from dealerdesk.core.database.base import (
    Base,
    CreatedByMixin,
    TenantMixin,
    TimestampMixin,
    UUIDMixin,
)


class ServiceTicket(Base, UUIDMixin, TimestampMixin, TenantMixin, CreatedByMixin):
    """A service call for a customer, optionally about one device."""

    __tablename__ = "service_tickets"
    __table_args__ = (
        UniqueConstraint(
            "tenant_id", "ticket_number", name="uq_service_tickets_tenant_ticket_number"
        ),
    )

    ticket_number: Mapped[str] = mapped_column(String(MAX_CODE_LENGTH), nullable=False)
    customer_id: Mapped[UUID] = mapped_column(
        ForeignKey("business_records.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    equipment_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("equipment.id", ondelete="SET NULL"),
        index=True,
    )
    technician_id: Mapped[str | None] = mapped_column(String(100))

    title: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    issue_description: Mapped[str | None] = mapped_column(Text)
    service_type: Mapped[str | None] = mapped_column(String(MAX_CODE_LENGTH))
    priority: Mapped[str] = mapped_column(String(20), default="medium")
    status: Mapped[str] = mapped_column(String(20), default="open", index=True)

    scheduled_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    completed_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    labor_hours: Mapped[float | None] = mapped_column(Numeric(6, 2, asdecimal=False))
    labor_cost: Mapped[float | None] = mapped_column(Numeric(10, 2, asdecimal=False))
    parts_cost: Mapped[float | None] = mapped_column(Numeric(10, 2, asdecimal=False))
    total_cost: Mapped[float | None] = mapped_column(Numeric(10, 2, asdecimal=False))

    customer_satisfaction: Mapped[int | None] = mapped_column(Integer)
    resolution_notes: Mapped[str | None] = mapped_column(Text)
    follow_up_required: Mapped[bool] = mapped_column(Boolean, default=False)
    follow_up_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    def __repr__(self) -> str:
        return (
            f"<ServiceTicket(id={self.id}, ticket_number={self.ticket_number}, "
            f"status={self.status})>"
        )
