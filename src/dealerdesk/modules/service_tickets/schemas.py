"""Pydantic schemas for service tickets (storage names)."""

from datetime import datetime
from typing import Any, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from dealerdesk.core.constants import MAX_CODE_LENGTH, MAX_NAME_LENGTH
from dealerdesk.core.mapping.transformers import service_tickets


TicketPriority = Literal["low", "medium", "high", "urgent"]
TicketStatus = Literal["open", "assigned", "in_progress", "completed", "cancelled"]


class ServiceTicketFields(BaseModel):
    model_config = ConfigDict(extra="forbid")

    ticket_number: str | None = Field(None, min_length=1, max_length=MAX_CODE_LENGTH)
    customer_id: UUID | None = None
    equipment_id: UUID | None = None
    technician_id: str | None = None

    title: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    issue_description: str | None = None
    service_type: str | None = None
    priority: TicketPriority | None = None
    status: TicketStatus | None = None

    scheduled_date: datetime | None = None
    completed_date: datetime | None = None

    labor_hours: float | None = Field(None, ge=0)
    labor_cost: float | None = Field(None, ge=0)
    parts_cost: float | None = Field(None, ge=0)
    total_cost: float | None = Field(None, ge=0)

    customer_satisfaction: int | None = Field(None, ge=1, le=5)
    resolution_notes: str | None = None
    follow_up_required: bool | None = None
    follow_up_date: datetime | None = None


class ServiceTicketCreate(ServiceTicketFields):
    """Schema for opening a ticket."""

    ticket_number: str = Field(..., min_length=1, max_length=MAX_CODE_LENGTH)
    customer_id: UUID
    title: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    status: TicketStatus = "open"


class ServiceTicketUpdate(ServiceTicketFields):
    """Schema for partial updates."""


class ServiceTicketRead(ServiceTicketFields):
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: UUID
    tenant_id: UUID
    ticket_number: str
    customer_id: UUID
    title: str
    priority: str | None = None
    status: str
    created_by: UUID | None = None
    created_at: datetime
    updated_at: datetime


def service_ticket_response(row: Any) -> dict[str, Any]:
    """Render a stored ticket with API field names."""
    return service_tickets.to_external(
        ServiceTicketRead.model_validate(row).model_dump(mode="json")
    )
