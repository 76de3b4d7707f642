"""initial_schema

Revision ID: 5d1c0a7e2b34
Revises:
Create Date: 2026-10-01 00:01:00.000000

Creates tenants, users, business records with their activities,
equipment and service tickets.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "5d1c0a7e2b34"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _common_columns() -> list[sa.Column]:
    """id and timestamp columns shared by every table."""
    return [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def _tenant_column() -> list[sa.SchemaItem]:
    return [
        sa.Column("tenant_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"], ondelete="CASCADE"),
    ]


def _money(precision: int = 12) -> sa.Numeric:
    return sa.Numeric(precision=precision, scale=2)


def upgrade() -> None:
    """Upgrade database schema."""
    # Tenants
    op.create_table(
        "tenants",
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("slug", sa.String(length=63), nullable=False),
        sa.Column("subdomain_prefix", sa.String(length=63), nullable=True),
        sa.Column("path_prefix", sa.String(length=63), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_common_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("subdomain_prefix"),
        sa.UniqueConstraint("path_prefix"),
    )
    op.create_index(op.f("ix_tenants_id"), "tenants", ["id"], unique=False)
    op.create_index(op.f("ix_tenants_name"), "tenants", ["name"], unique=False)
    op.create_index(op.f("ix_tenants_slug"), "tenants", ["slug"], unique=True)

    # Users
    op.create_table(
        "users",
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_common_columns(),
        *_tenant_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("tenant_id", "email", name="uq_users_tenant_email"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=False)
    op.create_index(op.f("ix_users_tenant_id"), "users", ["tenant_id"], unique=False)

    # Business records (leads and customers)
    op.create_table(
        "business_records",
        sa.Column("record_type", sa.String(length=20), nullable=False),
        sa.Column("status", sa.String(length=50), nullable=False),
        sa.Column("company_name", sa.String(length=255), nullable=False),
        sa.Column("website", sa.String(length=255), nullable=True),
        sa.Column("industry", sa.String(length=100), nullable=True),
        sa.Column("employee_count", sa.Integer(), nullable=True),
        sa.Column("annual_revenue", _money(15), nullable=True),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("primary_contact_name", sa.String(length=255), nullable=True),
        sa.Column("primary_contact_email", sa.String(length=255), nullable=True),
        sa.Column("primary_contact_phone", sa.String(length=50), nullable=True),
        sa.Column("primary_contact_title", sa.String(length=100), nullable=True),
        sa.Column("billing_contact_name", sa.String(length=255), nullable=True),
        sa.Column("billing_contact_email", sa.String(length=255), nullable=True),
        sa.Column("billing_contact_phone", sa.String(length=50), nullable=True),
        sa.Column("address_line1", sa.String(length=255), nullable=True),
        sa.Column("address_line2", sa.String(length=255), nullable=True),
        sa.Column("city", sa.String(length=100), nullable=True),
        sa.Column("state", sa.String(length=100), nullable=True),
        sa.Column("postal_code", sa.String(length=20), nullable=True),
        sa.Column("country", sa.String(length=100), nullable=True),
        sa.Column("billing_address_1", sa.String(length=255), nullable=True),
        sa.Column("billing_address_2", sa.String(length=255), nullable=True),
        sa.Column("billing_city", sa.String(length=100), nullable=True),
        sa.Column("billing_state", sa.String(length=100), nullable=True),
        sa.Column("billing_zip_code", sa.String(length=20), nullable=True),
        sa.Column("source", sa.String(length=50), nullable=True),
        sa.Column("sales_stage", sa.String(length=50), nullable=True),
        sa.Column("interest_level", sa.String(length=20), nullable=True),
        sa.Column("lead_score", sa.Integer(), nullable=True),
        sa.Column("probability", sa.Integer(), nullable=True),
        sa.Column("estimated_amount", _money(), nullable=True),
        sa.Column("close_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("credit_limit", _money(), nullable=True),
        sa.Column("payment_terms", sa.String(length=50), nullable=True),
        sa.Column("billing_terms", sa.String(length=50), nullable=True),
        sa.Column("tax_exempt", sa.Boolean(), nullable=False),
        sa.Column("tax_id", sa.String(length=50), nullable=True),
        sa.Column("current_balance", _money(), nullable=True),
        sa.Column("customer_number", sa.String(length=50), nullable=True),
        sa.Column("customer_since", sa.DateTime(timezone=True), nullable=True),
        sa.Column("customer_until", sa.DateTime(timezone=True), nullable=True),
        sa.Column("customer_tier", sa.String(length=50), nullable=True),
        sa.Column("deactivation_reason", sa.String(length=255), nullable=True),
        sa.Column("reactivation_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("preferred_technician", sa.String(length=255), nullable=True),
        sa.Column("last_service_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("next_scheduled_service", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_contact_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("next_follow_up_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("priority", sa.String(length=20), nullable=True),
        sa.Column("owner_id", sa.String(length=50), nullable=True),
        sa.Column("assigned_sales_rep", sa.String(length=255), nullable=True),
        sa.Column("territory", sa.String(length=100), nullable=True),
        sa.Column("external_customer_id", sa.String(length=100), nullable=True),
        sa.Column("external_system_id", sa.String(length=100), nullable=True),
        sa.Column("migration_status", sa.String(length=50), nullable=True),
        sa.Column("last_sync_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("external_data", sa.JSON(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_by", sa.Uuid(), nullable=True),
        sa.Column("converted_by", sa.Uuid(), nullable=True),
        sa.Column("deactivated_by", sa.Uuid(), nullable=True),
        *_common_columns(),
        *_tenant_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "tenant_id",
            "customer_number",
            name="uq_business_records_tenant_customer_number",
        ),
    )
    op.create_index(op.f("ix_business_records_id"), "business_records", ["id"], unique=False)
    op.create_index(
        op.f("ix_business_records_tenant_id"), "business_records", ["tenant_id"], unique=False
    )
    op.create_index(
        op.f("ix_business_records_record_type"),
        "business_records",
        ["record_type"],
        unique=False,
    )
    op.create_index(
        op.f("ix_business_records_status"), "business_records", ["status"], unique=False
    )
    op.create_index(
        op.f("ix_business_records_sales_stage"),
        "business_records",
        ["sales_stage"],
        unique=False,
    )
    op.create_index(
        op.f("ix_business_records_assigned_sales_rep"),
        "business_records",
        ["assigned_sales_rep"],
        unique=False,
    )

    # Business record activities
    op.create_table(
        "business_record_activities",
        sa.Column("business_record_id", sa.Uuid(), nullable=False),
        sa.Column("activity_type", sa.String(length=20), nullable=False),
        sa.Column("subject", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("direction", sa.String(length=20), nullable=True),
        sa.Column("outcome", sa.String(length=50), nullable=True),
        sa.Column("scheduled_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("follow_up_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_by", sa.Uuid(), nullable=True),
        *_common_columns(),
        *_tenant_column(),
        sa.ForeignKeyConstraint(
            ["business_record_id"], ["business_records.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_business_record_activities_id"),
        "business_record_activities",
        ["id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_business_record_activities_tenant_id"),
        "business_record_activities",
        ["tenant_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_business_record_activities_business_record_id"),
        "business_record_activities",
        ["business_record_id"],
        unique=False,
    )

    # Equipment
    op.create_table(
        "equipment",
        sa.Column("customer_id", sa.Uuid(), nullable=False),
        sa.Column("serial_number", sa.String(length=100), nullable=False),
        sa.Column("model_number", sa.String(length=100), nullable=True),
        sa.Column("manufacturer", sa.String(length=100), nullable=True),
        sa.Column("equipment_type", sa.String(length=50), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=50), nullable=False),
        sa.Column("install_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("purchase_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("warranty_expiration", sa.DateTime(timezone=True), nullable=True),
        sa.Column("lease_end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("purchase_price", _money(10), nullable=True),
        sa.Column("current_value", _money(10), nullable=True),
        sa.Column("location_id", sa.String(length=100), nullable=True),
        sa.Column("service_contract", sa.String(length=100), nullable=True),
        sa.Column("last_service_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("next_service_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("meter_type", sa.String(length=50), nullable=True),
        sa.Column("current_meter_reading", sa.Integer(), nullable=True),
        sa.Column("previous_meter_reading", sa.Integer(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_by", sa.Uuid(), nullable=True),
        *_common_columns(),
        *_tenant_column(),
        sa.ForeignKeyConstraint(["customer_id"], ["business_records.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "tenant_id", "serial_number", name="uq_equipment_tenant_serial_number"
        ),
    )
    op.create_index(op.f("ix_equipment_id"), "equipment", ["id"], unique=False)
    op.create_index(op.f("ix_equipment_tenant_id"), "equipment", ["tenant_id"], unique=False)
    op.create_index(
        op.f("ix_equipment_customer_id"), "equipment", ["customer_id"], unique=False
    )
    op.create_index(op.f("ix_equipment_status"), "equipment", ["status"], unique=False)

    # Service tickets
    op.create_table(
        "service_tickets",
        sa.Column("ticket_number", sa.String(length=50), nullable=False),
        sa.Column("customer_id", sa.Uuid(), nullable=False),
        sa.Column("equipment_id", sa.Uuid(), nullable=True),
        sa.Column("technician_id", sa.String(length=100), nullable=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("issue_description", sa.Text(), nullable=True),
        sa.Column("service_type", sa.String(length=50), nullable=True),
        sa.Column("priority", sa.String(length=20), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("scheduled_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("labor_hours", sa.Numeric(precision=6, scale=2), nullable=True),
        sa.Column("labor_cost", _money(10), nullable=True),
        sa.Column("parts_cost", _money(10), nullable=True),
        sa.Column("total_cost", _money(10), nullable=True),
        sa.Column("customer_satisfaction", sa.Integer(), nullable=True),
        sa.Column("resolution_notes", sa.Text(), nullable=True),
        sa.Column("follow_up_required", sa.Boolean(), nullable=False),
        sa.Column("follow_up_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_by", sa.Uuid(), nullable=True),
        *_common_columns(),
        *_tenant_column(),
        sa.ForeignKeyConstraint(["customer_id"], ["business_records.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["equipment_id"], ["equipment.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "tenant_id", "ticket_number", name="uq_service_tickets_tenant_ticket_number"
        ),
    )
    op.create_index(op.f("ix_service_tickets_id"), "service_tickets", ["id"], unique=False)
    op.create_index(
        op.f("ix_service_tickets_tenant_id"), "service_tickets", ["tenant_id"], unique=False
    )
    op.create_index(
        op.f("ix_service_tickets_customer_id"), "service_tickets", ["customer_id"], unique=False
    )
    op.create_index(
        op.f("ix_service_tickets_equipment_id"),
        "service_tickets",
        ["equipment_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_service_tickets_status"), "service_tickets", ["status"], unique=False
    )


def downgrade() -> None:
    """Downgrade database schema."""
    op.drop_table("service_tickets")
    op.drop_table("equipment")
    op.drop_table("business_record_activities")
    op.drop_table("business_records")
    op.drop_table("users")
    op.drop_table("tenants")
