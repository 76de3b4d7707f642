"""Unit tests for field-name mappings."""

import pytest

from dealerdesk.core.mapping import (
    ALL_MAPPINGS,
    BUSINESS_RECORD_FIELDS,
    FieldMapping,
    to_external,
    to_storage,
    transform_keys,
)


class TestFieldMapping:
    """Tests for the mapping tables themselves."""

    @pytest.mark.parametrize("mapping", ALL_MAPPINGS, ids=lambda m: m.entity)
    def test_inverse_undoes_forward(self, mapping: FieldMapping):
        """Every storage name maps back to the external name it came from."""
        for external, storage in mapping.forward.items():
            assert mapping.inverse[storage] == external

    @pytest.mark.parametrize("mapping", ALL_MAPPINGS, ids=lambda m: m.entity)
    def test_inverse_has_same_size(self, mapping: FieldMapping):
        assert len(mapping.inverse) == len(mapping.forward) == len(mapping)

    def test_duplicate_storage_name_rejected(self):
        """Two external names may not share a storage name."""
        with pytest.raises(ValueError, match="company_name"):
            FieldMapping(
                entity="broken",
                forward={"companyName": "company_name", "company": "company_name"},
            )

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            BUSINESS_RECORD_FIELDS.forward["companyName"] = "name"  # type: ignore[index]

    def test_known_business_record_names(self):
        assert BUSINESS_RECORD_FIELDS.forward["estimatedDealValue"] == "estimated_amount"
        assert BUSINESS_RECORD_FIELDS.forward["billingPostalCode"] == "billing_zip_code"
        assert BUSINESS_RECORD_FIELDS.inverse["deactivation_reason"] == "churnReason"


class TestTransformKeys:
    """Tests for renaming record keys."""

    def test_renames_known_keys(self):
        record = {"companyName": "Acme Print", "leadSource": "referral"}

        assert to_storage(record, BUSINESS_RECORD_FIELDS) == {
            "company_name": "Acme Print",
            "source": "referral",
        }

    def test_unmapped_keys_pass_through(self):
        """Keys missing from the table are copied unchanged."""
        record = {"city": "Reno", "somethingElse": 1}

        assert to_storage(record, BUSINESS_RECORD_FIELDS) == record
        assert to_external(record, BUSINESS_RECORD_FIELDS) == record

    def test_values_are_untouched(self):
        nested = {"erpId": "X-1"}
        result = to_storage({"externalData": nested}, BUSINESS_RECORD_FIELDS)

        assert result == {"external_data": nested}
        assert result["external_data"] is nested

    def test_input_is_not_modified(self):
        record = {"companyName": "Acme Print"}
        transform_keys(record, {"companyName": "company_name"})

        assert record == {"companyName": "Acme Print"}

    def test_empty_record(self):
        assert to_storage({}, BUSINESS_RECORD_FIELDS) == {}

    def test_round_trip_restores_external_names(self):
        record = {
            "companyName": "Acme Print",
            "primaryContactEmail": "ops@acmeprint.example",
            "recordType": "lead",
            "notes": "Prefers mornings",
        }

        assert to_external(to_storage(record, BUSINESS_RECORD_FIELDS), BUSINESS_RECORD_FIELDS) == (
            record
        )
