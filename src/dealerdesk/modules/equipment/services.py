"""Equipment service."""

from collections.abc import Mapping, Sequence
from typing import Annotated, Any
from uuid import UUID

import structlog
from fastapi import Depends

from dealerdesk.api.dependencies import DBSession
from dealerdesk.core.constants import DEFAULT_PAGE_SIZE
from dealerdesk.core.errors import NotFoundError, ValidationError
from dealerdesk.core.mapping.transformers import equipment as transformer
from dealerdesk.core.tenancy.context import TenantContext
from dealerdesk.core.validation import drop_server_fields, validate_payload
from dealerdesk.modules.business_records.repos import BusinessRecordRepository
from dealerdesk.modules.equipment.models import Equipment
from dealerdesk.modules.equipment.repos import EquipmentRepository
from dealerdesk.modules.equipment.schemas import EquipmentCreate, EquipmentUpdate


logger = structlog.get_logger()

# Sending null for these leaves them unchanged
REQUIRED_COLUMNS = frozenset({"customer_id", "serial_number", "status"})


class EquipmentService:
    """Installed equipment of one tenant's customers."""

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.repo = EquipmentRepository(db)
        self.records = BusinessRecordRepository(db)

    async def get(self, equipment_id: UUID, tenant: TenantContext) -> Equipment:
        item = await self.repo.get(equipment_id, tenant.tenant_id)
        if item is None:
            raise NotFoundError(
                "Equipment not found",
                resource="equipment",
                resource_id=str(equipment_id),
            )
        return item

    async def list_equipment(
        self,
        tenant: TenantContext,
        customer_id: UUID | None = None,
        status: str | None = None,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> Sequence[Equipment]:
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
    ) -> Equipment:
        """Register a device.

        Raises:
            ValidationError: On invalid fields, or a customer outside this tenant
        """
        data = drop_server_fields(transformer.to_storage(payload))
        validated = validate_payload(EquipmentCreate, data, transformer)
        await self._check_customer(validated.customer_id, tenant)

        item = Equipment(**validated.model_dump(exclude_unset=True), created_by=user_id)
        item = await self.repo.create(item, tenant.tenant_id)

        logger.info(
            "equipment_created",
            equipment_id=str(item.id),
            customer_id=str(item.customer_id),
        )
        return item

    async def update(
        self,
        equipment_id: UUID,
        payload: Mapping[str, Any],
        tenant: TenantContext,
    ) -> Equipment:
        item = await self.get(equipment_id, tenant)
        data = drop_server_fields(transformer.to_storage(payload))
        validated = validate_payload(EquipmentUpdate, data, transformer)
        changes = {
            key: value
            for key, value in validated.model_dump(exclude_unset=True).items()
            if value is not None or key not in REQUIRED_COLUMNS
        }
        if "customer_id" in changes:
            await self._check_customer(changes["customer_id"], tenant)

        item = await self.repo.update(item, changes)
        logger.info("equipment_updated", equipment_id=str(item.id), fields=sorted(changes))
        return item

    async def _check_customer(self, customer_id: UUID, tenant: TenantContext) -> None:
        if await self.records.get(customer_id, tenant.tenant_id) is None:
            raise ValidationError(
                "Invalid equipment data",
                errors=[{"field": "customerId", "message": "Customer not found"}],
            )


EquipmentSvc = Annotated[EquipmentService, Depends(EquipmentService)]
