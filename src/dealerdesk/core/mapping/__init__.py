"""Field-name mapping between the API and the database."""

from dealerdesk.core.mapping.fields import (
    FieldMapping,
    to_external,
    to_storage,
    transform_keys,
)
from dealerdesk.core.mapping.tables import (
    ACTIVITY_FIELDS,
    ALL_MAPPINGS,
    BUSINESS_RECORD_FIELDS,
    EQUIPMENT_FIELDS,
    SERVICE_TICKET_FIELDS,
)
from dealerdesk.core.mapping.transformers import (
    BusinessRecordTransformer,
    EntityTransformer,
    Normalized,
)


__all__ = [
    "ACTIVITY_FIELDS",
    "ALL_MAPPINGS",
    "BUSINESS_RECORD_FIELDS",
    "EQUIPMENT_FIELDS",
    "SERVICE_TICKET_FIELDS",
    "BusinessRecordTransformer",
    "EntityTransformer",
    "FieldMapping",
    "Normalized",
    "to_external",
    "to_storage",
    "transform_keys",
]
