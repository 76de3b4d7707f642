"""Equipment database models."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from dealerdesk.core.constants import MAX_CODE_LENGTH
from dealerdesk.core.database.base import (
    Base,
    CreatedByMixin,
    TenantMixin,
    TimestampMixin,
    UUIDMixin,
)


class Equipment(Base, UUIDMixin, TimestampMixin, TenantMixin, CreatedByMixin):
    """A copier, printer or other device installed at a customer."""

    __tablename__ = "equipment"
    __table_args__ = (
        UniqueConstraint("tenant_id", "serial_number", name="uq_equipment_tenant_serial_number"),
    )

    customer_id: Mapped[UUID] = mapped_column(
        ForeignKey("business_records.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    serial_number: Mapped[str] = mapped_column(String(100), nullable=False)
    model_number: Mapped[str | None] = mapped_column(String(100))
    manufacturer: Mapped[str | None] = mapped_column(String(100))
    equipment_type: Mapped[str | None] = mapped_column(String(MAX_CODE_LENGTH))
    description: Mapped[str | None] = mapped_column(Text)
    status: Mapped[str] = mapped_column(String(MAX_CODE_LENGTH), default="active", index=True)

    install_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    purchase_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    warranty_expiration: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    lease_end_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    purchase_price: Mapped[float | None] = mapped_column(Numeric(10, 2, asdecimal=False))
    current_value: Mapped[float | None] = mapped_column(Numeric(10, 2, asdecimal=False))

    location_id: Mapped[str | None] = mapped_column(String(100))
    service_contract: Mapped[str | None] = mapped_column(String(100))
    last_service_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    next_service_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    meter_type: Mapped[str | None] = mapped_column(String(MAX_CODE_LENGTH))
    current_meter_reading: Mapped[int | None] = mapped_column(Integer)
    previous_meter_reading: Mapped[int | None] = mapped_column(Integer)

    notes: Mapped[str | None] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"<Equipment(id={self.id}, serial_number={self.serial_number})>"

