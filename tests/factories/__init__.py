"""Test factories for generating test data."""

from tests.factories.business_record import BusinessRecordPayloadFactory, LeadPayloadFactory
from tests.factories.tenant import TenantFactory, create_tenant
from tests.factories.user import DEFAULT_PASSWORD, UserCreateFactory, create_user


__all__ = [
    "DEFAULT_PASSWORD",
    "BusinessRecordPayloadFactory",
    "LeadPayloadFactory",
    "TenantFactory",
    "UserCreateFactory",
    "create_tenant",
    "create_user",
]
