"""Field mappings for the dealer ERPs and CRMs business records sync with.

E-Automate (the copier-dealer ERP) speaks PascalCase column names and is the
system of record for customers, so it is mapped both ways. Salesforce only
receives accounts. Columns with no counterpart on the other side are left
out of the tables.
"""

from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any

from dealerdesk.core.mapping.fields import FieldMapping
from dealerdesk.core.mapping.lifecycle import CUSTOMER


EAUTOMATE = "eautomate"
SALESFORCE = "salesforce"

EAUTOMATE_FIELDS = FieldMapping(
    entity="eautomate_customer",
    forward={
        "CompanyName": "company_name",
        "ContactName": "primary_contact_name",
        "Address1": "address_line1",
        "Address2": "address_line2",
        "City": "city",
        "State": "state",
        "ZipCode": "postal_code",
        "Phone": "phone",
        "Email": "primary_contact_email",
        "BillingContact": "billing_contact_name",
        "BillingAddress1": "billing_address_1",
        "BillingCity": "billing_city",
        "BillingState": "billing_state",
        "BillingZip": "billing_zip_code",
        "SalesRep": "assigned_sales_rep",
        "Territory": "territory",
        "CreditLimit": "credit_limit",
        "PaymentTerms": "payment_terms",
        "TaxExempt": "tax_exempt",
        "TaxID": "tax_id",
        "CustomerNumber": "customer_number",
        "ExternalId": "external_customer_id",
    },
)

SALESFORCE_FIELDS = FieldMapping(
    entity="salesforce_account",
    forward={
        "Name": "company_name",
        "Industry": "industry",
        "AnnualRevenue": "annual_revenue",
        "NumberOfEmployees": "employee_count",
        "Phone": "phone",
        "Website": "website",
        "BillingStreet": "billing_address_1",
        "BillingCity": "billing_city",
        "BillingState": "billing_state",
        "BillingPostalCode": "billing_zip_code",
        "ShippingStreet": "address_line1",
        "ShippingCity": "city",
        "ShippingState": "state",
        "ShippingPostalCode": "postal_code",
        "ShippingCountry": "country",
        "Description": "notes",
        "CustomerPriority__c": "priority",
        "ExternalId__c": "external_customer_id",
    },
)


def _now_iso(now: datetime | None) -> str:
    return (now or datetime.now(UTC)).isoformat()


def _outbound(record: Mapping[str, Any], mapping: FieldMapping) -> dict[str, Any]:
    # Every mapped field is sent, missing ones as None
    return {external: record.get(storage) for external, storage in mapping.forward.items()}


def prepare_for_eautomate(
    record: Mapping[str, Any], now: datetime | None = None
) -> dict[str, Any]:
    """Build an E-Automate customer row from a storage-named record."""
    payload = _outbound(record, EAUTOMATE_FIELDS)
    payload["LastSyncDate"] = _now_iso(now)
    return payload


def prepare_for_salesforce(
    record: Mapping[str, Any], now: datetime | None = None
) -> dict[str, Any]:
    """Build a Salesforce account from a storage-named record.

    Customers become ``Customer`` accounts, everything else ``Prospect``.
    """
    payload = _outbound(record, SALESFORCE_FIELDS)
    payload["Type"] = "Customer" if record.get("record_type") == CUSTOMER else "Prospect"
    payload["LastSyncDate__c"] = _now_iso(now)
    return payload


def from_eautomate(data: Mapping[str, Any], now: datetime | None = None) -> dict[str, Any]:
    """Turn an incoming E-Automate customer row into storage names.

    Columns the mapping does not know are kept under ``external_data``
    instead of being dropped. The result is stamped as synced from
    E-Automate.
    """
    record: dict[str, Any] = {}
    extra: dict[str, Any] = {}
    for key, value in data.items():
        storage = EAUTOMATE_FIELDS.forward.get(key)
        if storage is None:
            extra[key] = value
        else:
            record[storage] = value

    if extra:
        record["external_data"] = extra
    record.update(
        external_system_id=EAUTOMATE,
        migration_status="synced",
        last_sync_date=now or datetime.now(UTC),
    )
    return record


OUTBOUND_SYNC: Mapping[str, Callable[..., dict[str, Any]]] = {
    EAUTOMATE: prepare_for_eautomate,
    SALESFORCE: prepare_for_salesforce,
}
