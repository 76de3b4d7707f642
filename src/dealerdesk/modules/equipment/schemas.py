"""Pydantic schemas for equipment (storage names)."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from dealerdesk.core.mapping.transformers import equipment


class EquipmentFields(BaseModel):
    model_config = ConfigDict(extra="forbid")

    customer_id: UUID | None = None
    serial_number: str | None = Field(None, min_length=1, max_length=100)
    model_number: str | None = None
    manufacturer: str | None = None
    equipment_type: str | None = None
    description: str | None = None
    status: str | None = None

    install_date: datetime | None = None
    purchase_date: datetime | None = None
    warranty_expiration: datetime | None = None
    lease_end_date: datetime | None = None
    purchase_price: float | None = Field(None, ge=0)
    current_value: float | None = Field(None, ge=0)

    location_id: str | None = None
    service_contract: str | None = None
    last_service_date: datetime | None = None
    next_service_date: datetime | None = None

    meter_type: str | None = None
    current_meter_reading: int | None = Field(None, ge=0)
    previous_meter_reading: int | None = Field(None, ge=0)

    notes: str | None = None


class EquipmentCreate(EquipmentFields):
    """Schema for registering a device at a customer."""

    customer_id: UUID
    serial_number: str = Field(..., min_length=1, max_length=100)


class EquipmentUpdate(EquipmentFields):
    """Schema for partial updates."""


class EquipmentRead(EquipmentFields):
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: UUID
    tenant_id: UUID
    customer_id: UUID
    serial_number: str
    status: str
    created_by: UUID | None = None
    created_at: datetime
    updated_at: datetime


def equipment_response(row: Any) -> dict[str, Any]:
    """Render stored equipment with API field names."""
    return equipment.to_external(EquipmentRead.model_validate(row).model_dump(mode="json"))
