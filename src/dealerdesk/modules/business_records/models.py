"""Business record database models.

Leads and customers live in one table, told apart by ``record_type``.
Column names are the storage side of ``BUSINESS_RECORD_FIELDS``.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    Uuid,
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


def _money() -> Numeric:
    return Numeric(12, 2, asdecimal=False)


class BusinessRecord(Base, UUIDMixin, TimestampMixin, TenantMixin, CreatedByMixin):
    """A lead or customer of one dealer."""

    __tablename__ = "business_records"
    __table_args__ = (
        UniqueConstraint(
            "tenant_id", "customer_number", name="uq_business_records_tenant_customer_number"
        ),
    )

    record_type: Mapped[str] = mapped_column(String(20), default="lead", index=True)
    status: Mapped[str] = mapped_column(String(MAX_CODE_LENGTH), default="new", index=True)

    # Company
    company_name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    website: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH))
    industry: Mapped[str | None] = mapped_column(String(100))
    employee_count: Mapped[int | None] = mapped_column(Integer)
    annual_revenue: Mapped[float | None] = mapped_column(Numeric(15, 2, asdecimal=False))
    phone: Mapped[str | None] = mapped_column(String(MAX_CODE_LENGTH))

    # Contacts
    primary_contact_name: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH))
    primary_contact_email: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH))
    primary_contact_phone: Mapped[str | None] = mapped_column(String(MAX_CODE_LENGTH))
    primary_contact_title: Mapped[str | None] = mapped_column(String(100))
    billing_contact_name: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH))
    billing_contact_email: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH))
    billing_contact_phone: Mapped[str | None] = mapped_column(String(MAX_CODE_LENGTH))

    # Addresses
    address_line1: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH))
    address_line2: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH))
    city: Mapped[str | None] = mapped_column(String(100))
    state: Mapped[str | None] = mapped_column(String(100))
    postal_code: Mapped[str | None] = mapped_column(String(20))
    country: Mapped[str | None] = mapped_column(String(100))
    billing_address_1: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH))
    billing_address_2: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH))
    billing_city: Mapped[str | None] = mapped_column(String(100))
    billing_state: Mapped[str | None] = mapped_column(String(100))
    billing_zip_code: Mapped[str | None] = mapped_column(String(20))

    # Pipeline
    source: Mapped[str | None] = mapped_column(String(MAX_CODE_LENGTH))
    sales_stage: Mapped[str | None] = mapped_column(String(MAX_CODE_LENGTH), index=True)
    interest_level: Mapped[str | None] = mapped_column(String(20))
    lead_score: Mapped[int | None] = mapped_column(Integer)
    probability: Mapped[int | None] = mapped_column(Integer)
    estimated_amount: Mapped[float | None] = mapped_column(_money())
    close_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    # Financial
    credit_limit: Mapped[float | None] = mapped_column(_money())
    payment_terms: Mapped[str | None] = mapped_column(String(MAX_CODE_LENGTH))
    billing_terms: Mapped[str | None] = mapped_column(String(MAX_CODE_LENGTH))
    tax_exempt: Mapped[bool] = mapped_column(Boolean, default=False)
    tax_id: Mapped[str | None] = mapped_column(String(MAX_CODE_LENGTH))
    current_balance: Mapped[float | None] = mapped_column(_money())

    # Customer
    customer_number: Mapped[str | None] = mapped_column(String(MAX_CODE_LENGTH))
    customer_since: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    customer_until: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    customer_tier: Mapped[str | None] = mapped_column(String(MAX_CODE_LENGTH))
    deactivation_reason: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH))
    reactivation_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    # Service
    preferred_technician: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH))
    last_service_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    next_scheduled_service: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    # Follow-up
    last_contact_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    next_follow_up_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    # Ownership
    priority: Mapped[str | None] = mapped_column(String(20), default="medium")
    owner_id: Mapped[str | None] = mapped_column(String(MAX_CODE_LENGTH))
    assigned_sales_rep: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH), index=True)
    territory: Mapped[str | None] = mapped_column(String(100))

    # External systems
    external_customer_id: Mapped[str | None] = mapped_column(String(100))
    external_system_id: Mapped[str | None] = mapped_column(String(100))
    migration_status: Mapped[str | None] = mapped_column(String(MAX_CODE_LENGTH))
    last_sync_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    external_data: Mapped[dict[str, Any] | None] = mapped_column(JSON)

    # Tracking
    notes: Mapped[str | None] = mapped_column(Text)
    converted_by: Mapped[UUID | None] = mapped_column(Uuid)
    deactivated_by: Mapped[UUID | None] = mapped_column(Uuid)

    def __repr__(self) -> str:
        return (
            f"<BusinessRecord(id={self.id}, company_name={self.company_name}, "
            f"record_type={self.record_type}, status={self.status})>"
        )


class BusinessRecordActivity(Base, UUIDMixin, TimestampMixin, TenantMixin, CreatedByMixin):
    """A call, email, meeting, note or task logged against a business record."""

    __tablename__ = "business_record_activities"

    business_record_id: Mapped[UUID] = mapped_column(
        ForeignKey("business_records.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    activity_type: Mapped[str] = mapped_column(String(20), nullable=False)
    subject: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    direction: Mapped[str | None] = mapped_column(String(20))
    outcome: Mapped[str | None] = mapped_column(String(MAX_CODE_LENGTH))
    scheduled_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    completed_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    follow_up_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    def __repr__(self) -> str:
        return (
            f"<BusinessRecordActivity(id={self.id}, type={self.activity_type}, "
            f"business_record_id={self.business_record_id})>"
        )
