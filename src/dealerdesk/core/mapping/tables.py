"""Field mapping tables for each entity exposed over the API.

Single-word names that are identical on both sides (``city``, ``notes``,
``probability``) are left out and travel through unmapped.
"""

from dealerdesk.core.mapping.fields import FieldMapping


BUSINESS_RECORD_FIELDS = FieldMapping(
    entity="business_record",
    forward={
        # Company and contacts
        "companyName": "company_name",
        "primaryContactName": "primary_contact_name",
        "primaryContactEmail": "primary_contact_email",
        "primaryContactPhone": "primary_contact_phone",
        "primaryContactTitle": "primary_contact_title",
        "billingContactName": "billing_contact_name",
        "billingContactEmail": "billing_contact_email",
        "billingContactPhone": "billing_contact_phone",
        "employeeCount": "employee_count",
        "annualRevenue": "annual_revenue",
        # Addresses
        "addressLine1": "address_line1",
        "addressLine2": "address_line2",
        "postalCode": "postal_code",
        "billingAddressLine1": "billing_address_1",
        "billingAddressLine2": "billing_address_2",
        "billingCity": "billing_city",
        "billingState": "billing_state",
        "billingPostalCode": "billing_zip_code",
        # Financial
        "estimatedDealValue": "estimated_amount",
        "creditLimit": "credit_limit",
        "paymentTerms": "payment_terms",
        "billingTerms": "billing_terms",
        "taxExempt": "tax_exempt",
        "taxId": "tax_id",
        # Pipeline
        "leadSource": "source",
        "salesStage": "sales_stage",
        "interestLevel": "interest_level",
        "leadScore": "lead_score",
        "closeDate": "close_date",
        # Customer
        "customerNumber": "customer_number",
        "customerSince": "customer_since",
        "customerUntil": "customer_until",
        "customerTier": "customer_tier",
        "currentBalance": "current_balance",
        "churnReason": "deactivation_reason",
        "reactivationDate": "reactivation_date",
        # Service
        "preferredTechnician": "preferred_technician",
        "lastServiceDate": "last_service_date",
        "nextScheduledService": "next_scheduled_service",
        # Follow-up
        "lastContactDate": "last_contact_date",
        "nextFollowUpDate": "next_follow_up_date",
        # Record management
        "recordType": "record_type",
        "status": "status",
        "priority": "priority",
        "ownerId": "owner_id",
        "assignedSalesRep": "assigned_sales_rep",
        "territory": "territory",
        # External systems
        "externalCustomerId": "external_customer_id",
        "externalSystemId": "external_system_id",
        "migrationStatus": "migration_status",
        "lastSyncDate": "last_sync_date",
        "externalData": "external_data",
        # System
        "tenantId": "tenant_id",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
        "createdBy": "created_by",
        "convertedBy": "converted_by",
        "deactivatedBy": "deactivated_by",
    },
)

ACTIVITY_FIELDS = FieldMapping(
    entity="business_record_activity",
    forward={
        "businessRecordId": "business_record_id",
        "activityType": "activity_type",
        "scheduledDate": "scheduled_date",
        "completedDate": "completed_date",
        "followUpDate": "follow_up_date",
        "tenantId": "tenant_id",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
        "createdBy": "created_by",
    },
)

EQUIPMENT_FIELDS = FieldMapping(
    entity="equipment",
    forward={
        "serialNumber": "serial_number",
        "modelNumber": "model_number",
        "manufacturer": "manufacturer",
        "equipmentType": "equipment_type",
        "installDate": "install_date",
        "warrantyExpiration": "warranty_expiration",
        "purchaseDate": "purchase_date",
        "purchasePrice": "purchase_price",
        "currentValue": "current_value",
        "leaseEndDate": "lease_end_date",
        "customerId": "customer_id",
        "locationId": "location_id",
        "serviceContract": "service_contract",
        "nextServiceDate": "next_service_date",
        "lastServiceDate": "last_service_date",
        "meterType": "meter_type",
        "currentMeterReading": "current_meter_reading",
        "previousMeterReading": "previous_meter_reading",
        "tenantId": "tenant_id",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
        "createdBy": "created_by",
    },
)

SERVICE_TICKET_FIELDS = FieldMapping(
    entity="service_ticket",
    forward={
        "ticketNumber": "ticket_number",
        "customerId": "customer_id",
        "equipmentId": "equipment_id",
        "technicianId": "technician_id",
        "issueDescription": "issue_description",
        "serviceType": "service_type",
        "priority": "priority",
        "status": "status",
        "scheduledDate": "scheduled_date",
        "completedDate": "completed_date",
        "laborHours": "labor_hours",
        "laborCost": "labor_cost",
        "partsCost": "parts_cost",
        "totalCost": "total_cost",
        "customerSatisfaction": "customer_satisfaction",
        "resolutionNotes": "resolution_notes",
        "followUpRequired": "follow_up_required",
        "followUpDate": "follow_up_date",
        "tenantId": "tenant_id",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
        "createdBy": "created_by",
    },
)

ALL_MAPPINGS: tuple[FieldMapping, ...] = (
    BUSINESS_RECORD_FIELDS,
    ACTIVITY_FIELDS,
    EQUIPMENT_FIELDS,
    SERVICE_TICKET_FIELDS,
)
