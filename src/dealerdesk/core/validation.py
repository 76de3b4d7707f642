"""Validation of storage-shaped payloads."""

from collections.abc import Collection
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from dealerdesk.core.errors import ValidationError
from dealerdesk.core.mapping.transformers import EntityTransformer


logger = structlog.get_logger()

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# Set by the server, never taken from a request body
SERVER_FIELDS = frozenset({"id", "tenant_id", "created_by", "created_at", "updated_at"})


def drop_server_fields(
    data: dict[str, Any],
    protected: Collection[str] = SERVER_FIELDS,
) -> dict[str, Any]:
    """Return ``data`` without server-owned fields, logging any the client sent."""
    ignored = sorted(key for key in data if key in protected)
    if ignored:
        logger.warning("protected_fields_ignored", fields=ignored)
    return {key: value for key, value in data.items() if key not in protected}


def validate_payload(
    schema: type[SchemaT],
    data: dict[str, Any],
    transformer: EntityTransformer,
) -> SchemaT:
    """Validate a storage-named payload, reporting errors with API names.

    Raises:
        ValidationError: Listing each offending field by its external name
    """
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        errors = []
        for error in exc.errors():
            loc = [str(part) for part in error.get("loc", ())]
            if loc:
                loc[0] = transformer.mapping.inverse.get(loc[0], loc[0])
            errors.append(
                {
                    "field": ".".join(loc) or "unknown",
                    "message": error.get("msg", "Invalid value"),
                    "type": error.get("type"),
                }
            )
        raise ValidationError(
            f"Invalid {transformer.entity.replace('_', ' ')} data",
            errors=errors,
        ) from exc
