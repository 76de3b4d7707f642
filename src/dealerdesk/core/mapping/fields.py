"""Bidirectional field-name mappings.

The API speaks camelCase (``companyName``) while the database speaks
snake_case (``company_name``). A ``FieldMapping`` holds the
external-to-storage table for one entity and derives the inverse from it,
so the two directions cannot drift apart.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class FieldMapping:
    """Immutable external <-> storage name table for one entity.

    Attributes:
        entity: Entity name, used in error messages and logs
        forward: External name to storage name
        inverse: Storage name to external name (derived)

    Raises:
        ValueError: If two external names share a storage name
    """

    entity: str
    forward: Mapping[str, str]
    inverse: Mapping[str, str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        inverse: dict[str, str] = {}
        for external, storage in self.forward.items():
            if storage in inverse:
                raise ValueError(
                    f"{self.entity}: storage name {storage!r} is mapped from both "
                    f"{inverse[storage]!r} and {external!r}"
                )
            inverse[storage] = external

        object.__setattr__(self, "forward", MappingProxyType(dict(self.forward)))
        object.__setattr__(self, "inverse", MappingProxyType(inverse))

    def __len__(self) -> int:
        return len(self.forward)


def transform_keys(record: Mapping[str, Any], table: Mapping[str, str]) -> dict[str, Any]:
    """Rename the keys of a flat record using a name table.

    Keys found in ``table`` are renamed; all other keys are copied as-is.
    Values are never touched and the input is not modified.

    Example:
        >>> transform_keys({"companyName": "Acme", "city": "Reno"}, {"companyName": "company_name"})
        {'company_name': 'Acme', 'city': 'Reno'}
    """
    return {table.get(key, key): value for key, value in record.items()}


def to_storage(record: Mapping[str, Any], mapping: FieldMapping) -> dict[str, Any]:
    """Rename external keys to storage keys."""
    return transform_keys(record, mapping.forward)


def to_external(record: Mapping[str, Any], mapping: FieldMapping) -> dict[str, Any]:
    """Rename storage keys to external keys."""
    return transform_keys(record, mapping.inverse)
