"""Unit tests for the E-Automate and Salesforce sync mappings."""

from datetime import UTC, datetime

import pytest

from dealerdesk.core.mapping.fields import FieldMapping
from dealerdesk.core.mapping.sync import (
    EAUTOMATE_FIELDS,
    OUTBOUND_SYNC,
    SALESFORCE_FIELDS,
    from_eautomate,
    prepare_for_eautomate,
    prepare_for_salesforce,
)
from dealerdesk.modules.business_records.models import BusinessRecord


SYNCED_AT = datetime(2026, 3, 1, 9, 30, tzinfo=UTC)

RECORD = {
    "company_name": "Acme Legal",
    "primary_contact_name": "Pat Doe",
    "primary_contact_email": "pat@acme-legal.com",
    "city": "Reno",
    "state": "NV",
    "postal_code": "89501",
    "assigned_sales_rep": "dana",
    "credit_limit": 5000.0,
    "tax_exempt": False,
    "customer_number": "C-1A2B3C4D",
    "external_customer_id": "EA-1001",
    "industry": "Legal",
    "employee_count": 40,
    "record_type": "customer",
}


class TestSyncTables:
    @pytest.mark.parametrize(
        "mapping", [EAUTOMATE_FIELDS, SALESFORCE_FIELDS], ids=lambda m: m.entity
    )
    def test_storage_names_are_columns(self, mapping: FieldMapping):
        columns = set(BusinessRecord.__table__.columns.keys())

        assert set(mapping.inverse) <= columns

    def test_systems_are_registered(self):
        assert sorted(OUTBOUND_SYNC) == ["eautomate", "salesforce"]


class TestPrepareForEAutomate:
    def test_maps_every_field(self):
        payload = prepare_for_eautomate(RECORD, now=SYNCED_AT)

        assert payload["CompanyName"] == "Acme Legal"
        assert payload["ContactName"] == "Pat Doe"
        assert payload["ZipCode"] == "89501"
        assert payload["SalesRep"] == "dana"
        assert payload["CreditLimit"] == 5000.0
        assert payload["CustomerNumber"] == "C-1A2B3C4D"
        assert payload["ExternalId"] == "EA-1001"
        assert payload["LastSyncDate"] == "2026-03-01T09:30:00+00:00"
        assert set(payload) == set(EAUTOMATE_FIELDS.forward) | {"LastSyncDate"}

    def test_missing_fields_are_none(self):
        payload = prepare_for_eautomate({"company_name": "Solo"}, now=SYNCED_AT)

        assert payload["CompanyName"] == "Solo"
        assert payload["Address2"] is None


class TestPrepareForSalesforce:
    def test_customer_account(self):
        payload = prepare_for_salesforce(RECORD, now=SYNCED_AT)

        assert payload["Name"] == "Acme Legal"
        assert payload["Type"] == "Customer"
        assert payload["Industry"] == "Legal"
        assert payload["NumberOfEmployees"] == 40
        assert payload["ShippingCity"] == "Reno"
        assert payload["ExternalId__c"] == "EA-1001"
        assert payload["LastSyncDate__c"] == "2026-03-01T09:30:00+00:00"

    @pytest.mark.parametrize("record_type", ["lead", None])
    def test_everything_else_is_a_prospect(self, record_type):
        payload = prepare_for_salesforce({**RECORD, "record_type": record_type})

        assert payload["Type"] == "Prospect"


class TestFromEAutomate:
    def test_maps_to_storage_names(self):
        record = from_eautomate(
            {
                "CompanyName": "Acme Legal",
                "ZipCode": "89501",
                "SalesRep": "dana",
                "ExternalId": "EA-1001",
            },
            now=SYNCED_AT,
        )

        assert record == {
            "company_name": "Acme Legal",
            "postal_code": "89501",
            "assigned_sales_rep": "dana",
            "external_customer_id": "EA-1001",
            "external_system_id": "eautomate",
            "migration_status": "synced",
            "last_sync_date": SYNCED_AT,
        }

    def test_unknown_columns_kept_as_external_data(self):
        record = from_eautomate({"CompanyName": "Acme", "BranchCode": "N-02", "Fax": None})

        assert record["external_data"] == {"BranchCode": "N-02", "Fax": None}
        assert "BranchCode" not in record

    def test_round_trip_of_mapped_fields(self):
        outbound = prepare_for_eautomate(RECORD, now=SYNCED_AT)
        outbound.pop("LastSyncDate")

        inbound = from_eautomate(outbound, now=SYNCED_AT)

        for storage in EAUTOMATE_FIELDS.inverse:
            assert inbound[storage] == RECORD.get(storage)
