"""Per-entity transformers.

An ``EntityTransformer`` binds a ``FieldMapping`` so route handlers can
convert whole payloads without passing tables around. The business record
transformer also normalizes record types and statuses, reporting whether
the input was recognized so callers can reject or log it.
"""

from collections.abc import Mapping
from typing import Any, NamedTuple

from dealerdesk.core.mapping.fields import FieldMapping, to_external, to_storage
from dealerdesk.core.mapping.lifecycle import CUSTOMER, LEAD
from dealerdesk.core.mapping.sync import EAUTOMATE_FIELDS
from dealerdesk.core.mapping.tables import (
    ACTIVITY_FIELDS,
    BUSINESS_RECORD_FIELDS,
    EQUIPMENT_FIELDS,
    SERVICE_TICKET_FIELDS,
)


class Normalized(NamedTuple):
    """Result of normalizing a raw value.

    ``value`` is always usable; ``recognized`` is False when it is a default
    or an unchanged pass-through of input that matched nothing.
    """

    value: str
    recognized: bool


LEAD_STATUS_ALIASES: Mapping[str, str] = {
    "new": "new",
    "contacted": "contacted",
    "qualified": "qualified",
    "proposal": "proposal_sent",
    "proposal_sent": "proposal_sent",
    "negotiating": "negotiating",
    "closed_won": "active",
    "closed_lost": "lost",
}

CUSTOMER_STATUS_ALIASES: Mapping[str, str] = {
    "active": "active",
    "inactive": "inactive",
    "churned": "churned",
    "expired": "expired",
    "competitor_switch": "competitor_switch",
    "non_payment": "non_payment",
}


class EntityTransformer:
    """Converts payloads of one entity between API and storage names."""

    def __init__(self, mapping: FieldMapping) -> None:
        self.mapping = mapping

    @property
    def entity(self) -> str:
        return self.mapping.entity

    def to_storage(self, record: Mapping[str, Any]) -> dict[str, Any]:
        return to_storage(record, self.mapping)

    def to_external(self, record: Mapping[str, Any]) -> dict[str, Any]:
        return to_external(record, self.mapping)


class BusinessRecordTransformer(EntityTransformer):
    """Transformer for leads and customers."""

    def __init__(self, mapping: FieldMapping = BUSINESS_RECORD_FIELDS) -> None:
        super().__init__(mapping)

    @staticmethod
    def normalize_record_type(value: Any) -> Normalized:
        """Classify a raw record type as ``lead`` or ``customer``.

        Only a case-insensitive exact ``"customer"`` is a customer; everything
        else, including ``"CUSTOMER "`` and the empty string, is a lead.

        Examples:
            >>> BusinessRecordTransformer.normalize_record_type("Customer")
            Normalized(value='customer', recognized=True)
            >>> BusinessRecordTransformer.normalize_record_type("prospect")
            Normalized(value='lead', recognized=False)
        """
        lowered = value.lower() if isinstance(value, str) else ""
        if lowered == CUSTOMER:
            return Normalized(CUSTOMER, True)
        return Normalized(LEAD, lowered == LEAD)

    @staticmethod
    def normalize_status(value: Any, record_type: str) -> Normalized:
        """Map a raw status through the aliases for ``record_type``.

        Unknown statuses come back unchanged with ``recognized=False``.
        """
        aliases = CUSTOMER_STATUS_ALIASES if record_type == CUSTOMER else LEAD_STATUS_ALIASES
        if isinstance(value, str) and value.lower() in aliases:
            return Normalized(aliases[value.lower()], True)
        return Normalized(value, False)


business_records = BusinessRecordTransformer()
activities = EntityTransformer(ACTIVITY_FIELDS)
equipment = EntityTransformer(EQUIPMENT_FIELDS)
service_tickets = EntityTransformer(SERVICE_TICKET_FIELDS)
eautomate = EntityTransformer(EAUTOMATE_FIELDS)
