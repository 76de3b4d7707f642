"""Business record service.

All writes to leads and customers go through here so the status
lifecycle is checked in the same code path that performs the write.
"""

from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from typing import Annotated, Any
from uuid import UUID, uuid4

import structlog
from fastapi import Depends

from dealerdesk.api.dependencies import DBSession
from dealerdesk.config import settings
from dealerdesk.core.constants import DEFAULT_PAGE_SIZE
from dealerdesk.core.errors import ConflictError, NotFoundError, ValidationError
from dealerdesk.core.mapping.lifecycle import (
    CUSTOMER,
    CUSTOMER_STATUSES,
    FORMER_CUSTOMER_STATUSES,
    LEAD,
    STATUS_TRANSITIONS,
    allowed_transitions,
    can_transition,
    default_status,
    statuses_for,
)
from dealerdesk.core.mapping.sync import EAUTOMATE, OUTBOUND_SYNC, from_eautomate
from dealerdesk.core.mapping.transformers import EntityTransformer, Normalized
from dealerdesk.core.mapping.transformers import activities as activity_transformer
from dealerdesk.core.mapping.transformers import business_records as transformer
from dealerdesk.core.mapping.transformers import eautomate as eautomate_transformer
from dealerdesk.core.tenancy.context import TenantContext
from dealerdesk.core.validation import SERVER_FIELDS, drop_server_fields, validate_payload
from dealerdesk.modules.business_records.models import BusinessRecord, BusinessRecordActivity
from dealerdesk.modules.business_records.repos import (
    ActivityRepository,
    BusinessRecordRepository,
)
from dealerdesk.modules.business_records.schemas import (
    ActivityCreate,
    BusinessRecordCreate,
    BusinessRecordUpdate,
)


logger = structlog.get_logger()

PROTECTED_FIELDS = SERVER_FIELDS | {"converted_by", "deactivated_by"}

# Sending null for these leaves them unchanged
REQUIRED_COLUMNS = frozenset({"record_type", "status", "company_name", "tax_exempt"})


def generate_customer_number() -> str:
    return f"C-{uuid4().hex[:8].upper()}"


def _now() -> datetime:
    return datetime.now(UTC)


class BusinessRecordService:
    """Lead and customer operations for one request."""

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.repo = BusinessRecordRepository(db)
        self.activities = ActivityRepository(db)

    # ------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------

    async def get(self, record_id: UUID, tenant: TenantContext) -> BusinessRecord:
        """Get a record of the tenant.

        Raises:
            NotFoundError: If no such record exists in this tenant
        """
        record = await self.repo.get(record_id, tenant.tenant_id)
        if record is None:
            raise NotFoundError(
                "Business record not found",
                resource="business_record",
                resource_id=str(record_id),
            )
        return record

    async def list_records(
        self,
        tenant: TenantContext,
        record_type: str | None = None,
        status: str | None = None,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> Sequence[BusinessRecord]:
        if record_type is not None:
            record_type = transformer.normalize_record_type(record_type).value
        return await self.repo.list_for_tenant(
            tenant.tenant_id,
            filters={"record_type": record_type, "status": status},
            limit=limit,
            offset=offset,
        )

    async def get_customer(self, record_id: UUID, tenant: TenantContext) -> BusinessRecord:
        record = await self.get(record_id, tenant)
        if record.record_type != CUSTOMER:
            raise NotFoundError(
                "Customer not found",
                resource="customer",
                resource_id=str(record_id),
            )
        return record

    async def list_customers(
        self,
        tenant: TenantContext,
        include_inactive: bool = False,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> Sequence[BusinessRecord]:
        """Current customers; former customers too with ``include_inactive``."""
        return await self.repo.list_customers(
            tenant.tenant_id,
            exclude_statuses=None if include_inactive else FORMER_CUSTOMER_STATUSES,
            limit=limit,
            offset=offset,
        )

    async def list_former_customers(
        self,
        tenant: TenantContext,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> Sequence[BusinessRecord]:
        return await self.repo.list_customers(
            tenant.tenant_id,
            include_statuses=FORMER_CUSTOMER_STATUSES,
            limit=limit,
            offset=offset,
        )

    async def status_transitions(
        self, record_id: UUID, tenant: TenantContext
    ) -> tuple[BusinessRecord, list[str]]:
        record = await self.get(record_id, tenant)
        return record, sorted(allowed_transitions(record.status))

    # ------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------

    async def create(
        self,
        payload: Mapping[str, Any],
        tenant: TenantContext,
        user_id: UUID,
    ) -> BusinessRecord:
        """Create a lead or customer from an API-named payload.

        The record type defaults to ``lead`` and the status to the first
        status of that type. Customers get a customer number and start date.

        Raises:
            ValidationError: On unknown fields, bad values, or (when strict
                validation is on) an unrecognized record type or status
        """
        data = self._prepare(payload)

        record_type = LEAD
        if data.get("record_type") is not None:
            record_type = self._resolve_record_type(data["record_type"])
        data["record_type"] = record_type

        if data.get("status") is None:
            data["status"] = default_status(record_type)
        else:
            data["status"] = self._resolve_status(data["status"], record_type)

        if record_type == CUSTOMER:
            data.setdefault("customer_number", generate_customer_number())
            data.setdefault("customer_since", _now())

        validated = validate_payload(BusinessRecordCreate, data, transformer)
        record = BusinessRecord(**validated.model_dump(exclude_unset=True), created_by=user_id)
        record = await self.repo.create(record, tenant.tenant_id)

        logger.info(
            "business_record_created",
            record_id=str(record.id),
            record_type=record.record_type,
            status=record.status,
        )
        return record

    async def update(
        self,
        record_id: UUID,
        payload: Mapping[str, Any],
        tenant: TenantContext,
        user_id: UUID,
    ) -> BusinessRecord:
        """Apply a partial update.

        A lead becomes a customer only when the same update moves it into a
        customer status. Customers never go back to being leads.

        Raises:
            NotFoundError: If the record is not in this tenant
            ConflictError: On a status transition the lifecycle forbids
            ValidationError: On invalid fields or values
        """
        record = await self.get(record_id, tenant)
        data = self._prepare(payload)

        target_type = record.record_type
        if data.get("record_type") is not None:
            target_type = self._resolve_record_type(data["record_type"])
            data["record_type"] = target_type
        else:
            data.pop("record_type", None)

        if record.record_type == CUSTOMER and target_type == LEAD:
            raise ConflictError(
                "A customer cannot be turned back into a lead",
                error_code="customer_to_lead_not_allowed",
            )

        converting = record.record_type == LEAD and target_type == CUSTOMER
        if data.get("status") is not None:
            data["status"] = self._resolve_status(data["status"], target_type)
            if data["status"] in STATUS_TRANSITIONS:
                self._check_transition(record, data["status"], target_type)
        else:
            data.pop("status", None)

        if converting:
            if data.get("status") not in CUSTOMER_STATUSES:
                raise ValidationError(
                    "Converting a lead to a customer requires a customer status",
                    errors=[
                        {
                            "field": "status",
                            "message": f"Must be one of {sorted(CUSTOMER_STATUSES)}",
                        }
                    ],
                )
            self._stamp_conversion(record, data)

        changes = self._update_changes(data)
        if converting:
            changes["converted_by"] = user_id
        record = await self.repo.update(record, changes)

        logger.info(
            "business_record_updated",
            record_id=str(record.id),
            fields=sorted(data),
            converted=converting,
        )
        return record

    async def convert_lead(
        self,
        record_id: UUID,
        tenant: TenantContext,
        user_id: UUID,
        payload: Mapping[str, Any] | None = None,
    ) -> BusinessRecord:
        """Turn a lead into an active customer.

        Extra fields in ``payload`` (customer tier, billing terms, ...) are
        applied in the same write.

        Raises:
            ConflictError: If the record is already a customer or its
                pipeline stage cannot close yet
        """
        record = await self.get(record_id, tenant)
        if record.record_type == CUSTOMER:
            raise ConflictError(
                "Business record is already a customer",
                error_code="already_customer",
            )
        self._check_transition(record, "active", CUSTOMER)

        data = self._prepare(payload or {})
        data.pop("record_type", None)
        data.pop("status", None)
        data.update(record_type=CUSTOMER, status="active")
        self._stamp_conversion(record, data)

        changes = self._update_changes(data)
        changes["converted_by"] = user_id
        record = await self.repo.update(record, changes)

        logger.info(
            "lead_converted",
            record_id=str(record.id),
            customer_number=record.customer_number,
        )
        return record

    async def deactivate(
        self,
        record_id: UUID,
        reason: str,
        tenant: TenantContext,
        user_id: UUID,
    ) -> BusinessRecord:
        """Mark a customer inactive, recording why and when the relationship ended."""
        record = await self.get_customer(record_id, tenant)
        self._check_transition(record, "inactive", CUSTOMER)

        record = await self.repo.update(
            record,
            {
                "status": "inactive",
                "deactivation_reason": reason,
                "deactivated_by": user_id,
                "customer_until": _now(),
            },
        )
        logger.info("customer_deactivated", record_id=str(record.id), reason=reason)
        return record

    async def reactivate(self, record_id: UUID, tenant: TenantContext) -> BusinessRecord:
        """Bring a former customer back to active."""
        record = await self.get_customer(record_id, tenant)
        if record.status == "active":
            raise ConflictError(
                "Customer is already active",
                error_code="already_active",
            )
        self._check_transition(record, "active", CUSTOMER)

        record = await self.repo.update(
            record,
            {
                "status": "active",
                "reactivation_date": _now(),
                "customer_until": None,
            },
        )
        logger.info("customer_reactivated", record_id=str(record.id))
        return record

    # ------------------------------------------------------------
    # External systems
    # ------------------------------------------------------------

    async def export_record(
        self, record_id: UUID, system: str, tenant: TenantContext
    ) -> dict[str, Any]:
        """Render a record the way ``system`` expects to receive it.

        Raises:
            NotFoundError: If the record or the system is unknown
        """
        prepare = OUTBOUND_SYNC.get(system)
        if prepare is None:
            raise NotFoundError(
                f"Unknown external system '{system}'",
                resource="external_system",
                resource_id=system,
            )
        record = await self.get(record_id, tenant)
        row = {
            column.key: getattr(record, column.key)
            for column in BusinessRecord.__table__.columns
        }
        return prepare(row)

    async def import_eautomate(
        self,
        payload: Mapping[str, Any],
        tenant: TenantContext,
        user_id: UUID,
    ) -> tuple[BusinessRecord, bool]:
        """Create or refresh a customer from an E-Automate row.

        Rows are matched on their E-Automate ``ExternalId``; new ones become
        active customers. Returns the record and whether it was created.

        Raises:
            ValidationError: If ``ExternalId`` is missing or a field is invalid
        """
        data = drop_server_fields(from_eautomate(payload), PROTECTED_FIELDS)
        external_id = data.get("external_customer_id")
        if not external_id:
            raise ValidationError(
                "Invalid eautomate customer data",
                errors=[{"field": "ExternalId", "message": "Field required"}],
            )

        record = await self.repo.get_by_external_id(
            tenant.tenant_id, EAUTOMATE, str(external_id)
        )
        if record is not None:
            changes = self._update_changes(data, eautomate_transformer)
            record = await self.repo.update(record, changes)
            logger.info("eautomate_customer_synced", record_id=str(record.id), created=False)
            return record, False

        data = {
            key: value
            for key, value in data.items()
            if value is not None or key not in REQUIRED_COLUMNS
        }
        data.update(record_type=CUSTOMER, status="active")
        if not data.get("customer_number"):
            data["customer_number"] = generate_customer_number()
        data.setdefault("customer_since", _now())

        validated = validate_payload(BusinessRecordCreate, data, eautomate_transformer)
        record = BusinessRecord(**validated.model_dump(exclude_unset=True), created_by=user_id)
        record = await self.repo.create(record, tenant.tenant_id)
        logger.info("eautomate_customer_synced", record_id=str(record.id), created=True)
        return record, True

    # ------------------------------------------------------------
    # Activities
    # ------------------------------------------------------------

    async def list_activities(
        self,
        record_id: UUID,
        tenant: TenantContext,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> Sequence[BusinessRecordActivity]:
        await self.get(record_id, tenant)
        return await self.activities.list_for_record(
            record_id, tenant.tenant_id, limit=limit, offset=offset
        )

    async def add_activity(
        self,
        record_id: UUID,
        payload: Mapping[str, Any],
        tenant: TenantContext,
        user_id: UUID,
    ) -> BusinessRecordActivity:
        record = await self.get(record_id, tenant)

        data = drop_server_fields(
            activity_transformer.to_storage(payload),
            SERVER_FIELDS | {"business_record_id"},
        )
        validated = validate_payload(ActivityCreate, data, activity_transformer)
        activity = BusinessRecordActivity(
            **validated.model_dump(exclude_unset=True),
            business_record_id=record.id,
            created_by=user_id,
        )
        activity = await self.activities.create(activity, tenant.tenant_id)

        record.last_contact_date = activity.completed_date or _now()
        await self.db.flush()

        logger.info(
            "business_record_activity_created",
            record_id=str(record.id),
            activity_id=str(activity.id),
            activity_type=activity.activity_type,
        )
        return activity

    # ------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------

    @staticmethod
    def _update_changes(
        data: dict[str, Any], entity_transformer: EntityTransformer = transformer
    ) -> dict[str, Any]:
        """Validate an update and drop nulls sent for required columns."""
        validated = validate_payload(BusinessRecordUpdate, data, entity_transformer)
        return {
            key: value
            for key, value in validated.model_dump(exclude_unset=True).items()
            if value is not None or key not in REQUIRED_COLUMNS
        }

    @staticmethod
    def _prepare(payload: Mapping[str, Any]) -> dict[str, Any]:
        """Rename to storage names and drop server-owned fields."""
        return drop_server_fields(transformer.to_storage(payload), PROTECTED_FIELDS)

    @staticmethod
    def _resolve_record_type(raw: Any) -> str:
        result = transformer.normalize_record_type(raw)
        if not result.recognized:
            _reject_or_log(
                "recordType",
                raw,
                result,
                f"Must be one of ['{CUSTOMER}', '{LEAD}']",
            )
        return result.value

    @staticmethod
    def _resolve_status(raw: Any, record_type: str) -> Any:
        """Normalize a status and check it belongs to the record type."""
        result = transformer.normalize_status(raw, record_type)
        valid = statuses_for(record_type)
        if not result.recognized or result.value not in valid:
            _reject_or_log(
                "status",
                raw,
                result,
                f"Must be one of {sorted(valid)} for a {record_type}",
            )
        return result.value

    @staticmethod
    def _check_transition(record: BusinessRecord, target: str, target_type: str) -> None:
        # Records holding a status outside the lifecycle may move to any valid one
        if record.status not in STATUS_TRANSITIONS:
            return
        if not can_transition(record.status, target):
            allowed = sorted(allowed_transitions(record.status))
            raise ConflictError(
                f"Cannot change status from '{record.status}' to '{target}'",
                error_code="invalid_status_transition",
                details={
                    "current_status": record.status,
                    "requested_status": target,
                    "record_type": target_type,
                    "allowed": allowed,
                },
            )

    @staticmethod
    def _stamp_conversion(record: BusinessRecord, data: dict[str, Any]) -> None:
        """Fill in customer fields the client did not send."""
        now = _now()
        if not record.customer_number:
            data.setdefault("customer_number", generate_customer_number())
        if not record.customer_since:
            data.setdefault("customer_since", now)
        data.setdefault("close_date", now)


def _reject_or_log(field: str, raw: Any, result: Normalized, message: str) -> None:
    """Reject an unrecognized value, or log and keep it when validation is lenient."""
    if settings.business_record_strict_validation:
        raise ValidationError(
            f"Invalid {field}: {raw!r}",
            errors=[{"field": field, "message": message}],
        )
    logger.warning(
        "business_record_value_not_recognized",
        field=field,
        value=raw,
        stored_as=result.value,
    )


BusinessRecordSvc = Annotated[BusinessRecordService, Depends(BusinessRecordService)]
