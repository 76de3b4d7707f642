"""Pydantic schemas for business records.

Write schemas use storage names: request bodies are renamed by the
business record transformer first, then validated here. Unknown fields
are rejected.
"""

from datetime import datetime
from typing import Any, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from dealerdesk.core.constants import MAX_NAME_LENGTH
from dealerdesk.core.mapping.transformers import activities, business_records


class BusinessRecordFields(BaseModel):
    """Client-writable business record columns."""

    model_config = ConfigDict(extra="forbid")

    record_type: str | None = None
    status: str | None = None

    company_name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    website: str | None = None
    industry: str | None = None
    employee_count: int | None = Field(None, ge=0)
    annual_revenue: float | None = None
    phone: str | None = None

    primary_contact_name: str | None = None
    primary_contact_email: str | None = None
    primary_contact_phone: str | None = None
    primary_contact_title: str | None = None
    billing_contact_name: str | None = None
    billing_contact_email: str | None = None
    billing_contact_phone: str | None = None

    address_line1: str | None = None
    address_line2: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    billing_address_1: str | None = None
    billing_address_2: str | None = None
    billing_city: str | None = None
    billing_state: str | None = None
    billing_zip_code: str | None = None

    source: str | None = None
    sales_stage: str | None = None
    interest_level: str | None = None
    lead_score: int | None = Field(None, ge=0, le=100)
    probability: int | None = Field(None, ge=0, le=100)
    estimated_amount: float | None = Field(None, ge=0)
    close_date: datetime | None = None

    credit_limit: float | None = None
    payment_terms: str | None = None
    billing_terms: str | None = None
    tax_exempt: bool = False
    tax_id: str | None = None
    current_balance: float | None = None

    customer_number: str | None = None
    customer_since: datetime | None = None
    customer_until: datetime | None = None
    customer_tier: str | None = None
    deactivation_reason: str | None = None
    reactivation_date: datetime | None = None

    preferred_technician: str | None = None
    last_service_date: datetime | None = None
    next_scheduled_service: datetime | None = None
    last_contact_date: datetime | None = None
    next_follow_up_date: datetime | None = None

    priority: str | None = None
    owner_id: str | None = None
    assigned_sales_rep: str | None = None
    territory: str | None = None

    external_customer_id: str | None = None
    external_system_id: str | None = None
    migration_status: str | None = None
    last_sync_date: datetime | None = None
    external_data: dict[str, Any] | None = None

    notes: str | None = None


class BusinessRecordCreate(BusinessRecordFields):
    """Schema for creating a lead or customer."""

    record_type: str
    status: str
    company_name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)


class BusinessRecordUpdate(BusinessRecordFields):
    """Schema for partial updates; only fields sent are changed."""


class BusinessRecordRead(BusinessRecordFields):
    """A stored business record."""

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: UUID
    tenant_id: UUID
    record_type: str
    status: str
    company_name: str
    created_by: UUID | None = None
    converted_by: UUID | None = None
    deactivated_by: UUID | None = None
    created_at: datetime
    updated_at: datetime


class DeactivateRequest(BaseModel):
    """Body of the customer deactivation endpoint."""

    reason: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)


class StatusTransitions(BaseModel):
    """Where a record's status may go next."""

    model_config = ConfigDict(populate_by_name=True)

    record_type: str = Field(alias="recordType")
    status: str
    allowed: list[str]


class ActivityCreate(BaseModel):
    """Schema for logging an activity (storage names)."""

    model_config = ConfigDict(extra="forbid")

    activity_type: Literal["call", "email", "meeting", "note", "task"]
    subject: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    description: str | None = None
    direction: Literal["inbound", "outbound"] | None = None
    outcome: str | None = None
    scheduled_date: datetime | None = None
    completed_date: datetime | None = None
    follow_up_date: datetime | None = None


class ActivityRead(ActivityCreate):
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: UUID
    tenant_id: UUID
    business_record_id: UUID
    created_by: UUID | None = None
    created_at: datetime
    updated_at: datetime


def business_record_response(row: Any) -> dict[str, Any]:
    """Render a stored record with API field names."""
    return business_records.to_external(
        BusinessRecordRead.model_validate(row).model_dump(mode="json")
    )


def activity_response(row: Any) -> dict[str, Any]:
    return activities.to_external(ActivityRead.model_validate(row).model_dump(mode="json"))
