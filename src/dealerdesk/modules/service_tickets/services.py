"""Service ticket service."""

from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from typing import Annotated, Any
from uuid import UUID, uuid4

import structlog
from fastapi import Depends

from dealerdesk.api.dependencies import DBSession
from dealerdesk.core.constants import DEFAULT_PAGE_SIZE
from dealerdesk.core.errors import NotFoundError, ValidationError
from dealerdesk.core.mapping.transformers import service_tickets as transformer
from dealerdesk.core.tenancy.context import TenantContext
from dealerdesk.core.validation import drop_server_fields, validate_payload
from dealerdesk.modules.business_records.repos import BusinessRecordRepository
from dealerdesk.modules.equipment.repos import EquipmentRepository
from dealerdesk.modules.service_tickets.models import ServiceTicket
from dealerdesk.modules.service_tickets.repos import ServiceTicketRepository
from dealerdesk.modules.service_tickets.schemas import ServiceTicketCreate, ServiceTicketUpdate


logger = structlog.get_logger()

# Sending null for these leaves them unchanged
REQUIRED_COLUMNS = frozenset(
    {"ticket_number", "customer_id", "title", "priority", "status", "follow_up_required"}
)


def generate_ticket_number() -> str:
    return f"T-{uuid4().hex[:8].upper()}"


class ServiceTicketService:
    """Service calls of one tenant."""

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.repo = ServiceTicketRepository(db)
        self.records = BusinessRecordRepository(db)
        self.equipment = EquipmentRepository(db)

    async def get(self, ticket_id: UUID, tenant: TenantContext) -> ServiceTicket:
        ticket = await self.repo.get(ticket_id, tenant.tenant_id)
        if ticket is None:
            raise NotFoundError(
                "Service ticket not found",
                resource="service_ticket",
                resource_id=str(ticket_id),
            )
        return ticket

    async def list_tickets(
        self,
        tenant: TenantContext,
        customer_id: UUID | None = None,
        status: str | None = None,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> Sequence[ServiceTicket]:
        return await self.repo.list_for_tenant(
            tenant.tenant_id,
            filters={"customer_id": customer_id, "status": status},
            limit=limit,
            offset=offset,
        )

    async def create(
        self,
        payload: Mapping[str, Any],
        tenant: TenantContext,
        user_id: UUID,
    ) -> ServiceTicket:
        """Open a ticket.

        A ticket number is generated when none is given; status starts
        as ``open``.

        Raises:
            ValidationError: On invalid fields, or a customer or device
                outside this tenant
        """
        data = drop_server_fields(transformer.to_storage(payload))
        if not data.get("ticket_number"):
            data["ticket_number"] = generate_ticket_number()

        validated = validate_payload(ServiceTicketCreate, data, transformer)
        values = validated.model_dump(exclude_unset=True)
        values.setdefault("status", validated.status)
        await self._check_references(validated.customer_id, validated.equipment_id, tenant)

        ticket = ServiceTicket(**values, created_by=user_id)
        ticket = await self.repo.create(ticket, tenant.tenant_id)

        logger.info(
            "service_ticket_created",
            ticket_id=str(ticket.id),
            ticket_number=ticket.ticket_number,
        )
        return ticket

    async def update(
        self,
        ticket_id: UUID,
        payload: Mapping[str, Any],
        tenant: TenantContext,
    ) -> ServiceTicket:
        """Apply a partial update; completing a ticket stamps its completion date."""
        ticket = await self.get(ticket_id, tenant)
        data = drop_server_fields(transformer.to_storage(payload))
        validated = validate_payload(ServiceTicketUpdate, data, transformer)
        changes = {
            key: value
            for key, value in validated.model_dump(exclude_unset=True).items()
            if value is not None or key not in REQUIRED_COLUMNS
        }

        if "customer_id" in changes or changes.get("equipment_id") is not None:
            await self._check_references(
                changes.get("customer_id", ticket.customer_id),
                changes.get("equipment_id", ticket.equipment_id),
                tenant,
            )

        if changes.get("status") == "completed" and ticket.completed_date is None:
            changes.setdefault("completed_date", datetime.now(UTC))

        ticket = await self.repo.update(ticket, changes)
        logger.info("service_ticket_updated", ticket_id=str(ticket.id), fields=sorted(changes))
        return ticket

    async def _check_references(
        self,
        customer_id: UUID,
        equipment_id: UUID | None,
        tenant: TenantContext,
    ) -> None:
        """Both references must be rows of this tenant, and the device the customer's."""
        errors = []
        if await self.records.get(customer_id, tenant.tenant_id) is None:
            errors.append({"field": "customerId", "message": "Customer not found"})
        if equipment_id is not None:
            device = await self.equipment.get(equipment_id, tenant.tenant_id)
            if device is None:
                errors.append({"field": "equipmentId", "message": "Equipment not found"})
            elif device.customer_id != customer_id:
                errors.append(
                    {"field": "equipmentId", "message": "Equipment belongs to another customer"}
                )
        if errors:
            raise ValidationError("Invalid service ticket data", errors=errors)


ServiceTicketSvc = Annotated[ServiceTicketService, Depends(ServiceTicketService)]
