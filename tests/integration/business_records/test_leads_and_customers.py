"""Integration tests for lead, customer and activity endpoints."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

from dealerdesk.modules.users.models import User
from tests.factories import BusinessRecordPayloadFactory, LeadPayloadFactory


pytestmark = pytest.mark.integration


async def create_lead(client: AsyncClient, **fields) -> dict:
    body = {**LeadPayloadFactory.build().model_dump(by_alias=True), **fields}
    response = await client.post("/api/v1/leads", json=body)
    assert response.status_code == 201, response.text
    return response.json()


async def create_customer(client: AsyncClient, **fields) -> dict:
    body = {**BusinessRecordPayloadFactory.build().model_dump(by_alias=True), **fields}
    response = await client.post("/api/v1/business-records", json=body)
    assert response.status_code == 201, response.text
    return response.json()


class TestLeads:
    async def test_create_lead_forces_lead_type(self, authenticated_client: AsyncClient):
        lead = await create_lead(authenticated_client, recordType="customer")

        assert lead["recordType"] == "lead"
        assert lead["status"] == "new"

    async def test_list_leads_only(self, authenticated_client: AsyncClient):
        lead = await create_lead(authenticated_client)
        await create_customer(authenticated_client)

        response = await authenticated_client.get("/api/v1/leads")

        assert response.status_code == 200
        assert [r["id"] for r in response.json()] == [lead["id"]]

    async def test_list_leads_by_status(self, authenticated_client: AsyncClient):
        await create_lead(authenticated_client)
        qualified = await create_lead(authenticated_client, status="qualified")

        response = await authenticated_client.get("/api/v1/leads", params={"status": "qualified"})

        assert [r["id"] for r in response.json()] == [qualified["id"]]


class TestConvertLead:
    async def test_convert(self, authenticated_client: AsyncClient, user: User):
        lead = await create_lead(authenticated_client, status="proposal_sent")

        response = await authenticated_client.post(
            f"/api/v1/leads/{lead['id']}/convert",
            json={"customerTier": "gold", "billingTerms": "net30"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["recordType"] == "customer"
        assert data["status"] == "active"
        assert data["customerNumber"].startswith("C-")
        assert data["customerSince"] is not None
        assert data["closeDate"] is not None
        assert data["customerTier"] == "gold"
        assert data["billingTerms"] == "net30"
        assert data["convertedBy"] == str(user.id)

    async def test_convert_without_body(self, authenticated_client: AsyncClient):
        lead = await create_lead(authenticated_client, status="negotiating")

        response = await authenticated_client.post(f"/api/v1/leads/{lead['id']}/convert")

        assert response.status_code == 200
        assert response.json()["recordType"] == "customer"

    async def test_convert_too_early(self, authenticated_client: AsyncClient):
        lead = await create_lead(authenticated_client)

        response = await authenticated_client.post(f"/api/v1/leads/{lead['id']}/convert")

        assert response.status_code == 409
        assert response.json()["allowed"] == ["contacted", "lost"]

    async def test_convert_customer_twice(self, authenticated_client: AsyncClient):
        lead = await create_lead(authenticated_client, status="negotiating")
        await authenticated_client.post(f"/api/v1/leads/{lead['id']}/convert")

        response = await authenticated_client.post(f"/api/v1/leads/{lead['id']}/convert")

        assert response.status_code == 409
        assert response.json()["type"].endswith("/errors/already_customer")

    async def test_convert_missing(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post(f"/api/v1/leads/{uuid4()}/convert")

        assert response.status_code == 404


class TestCustomers:
    async def test_list_current_customers(self, authenticated_client: AsyncClient):
        current = await create_customer(authenticated_client, companyName="Alpha Office")
        former = await create_customer(authenticated_client, companyName="Beta Legal")
        await create_lead(authenticated_client)
        await authenticated_client.post(
            f"/api/v1/customers/{former['id']}/deactivate", json={"reason": "Closed office"}
        )

        default = await authenticated_client.get("/api/v1/customers")
        everyone = await authenticated_client.get(
            "/api/v1/customers", params={"includeInactive": "true"}
        )

        assert [r["id"] for r in default.json()] == [current["id"]]
        assert [r["id"] for r in everyone.json()] == [current["id"], former["id"]]

    async def test_get_customer(self, authenticated_client: AsyncClient):
        customer = await create_customer(authenticated_client)

        response = await authenticated_client.get(f"/api/v1/customers/{customer['id']}")

        assert response.status_code == 200
        assert response.json()["id"] == customer["id"]

    async def test_lead_is_not_a_customer(self, authenticated_client: AsyncClient):
        lead = await create_lead(authenticated_client)

        response = await authenticated_client.get(f"/api/v1/customers/{lead['id']}")

        assert response.status_code == 404
        assert response.json()["resource"] == "customer"


class TestDeactivateAndReactivate:
    async def test_deactivate(self, authenticated_client: AsyncClient, user: User):
        customer = await create_customer(authenticated_client)

        response = await authenticated_client.post(
            f"/api/v1/customers/{customer['id']}/deactivate",
            json={"reason": "Switched to a competitor"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "inactive"
        assert data["churnReason"] == "Switched to a competitor"
        assert data["customerUntil"] is not None
        assert data["deactivatedBy"] == str(user.id)

        former = await authenticated_client.get("/api/v1/former-customers")
        assert [r["id"] for r in former.json()] == [customer["id"]]

    async def test_deactivate_needs_reason(self, authenticated_client: AsyncClient):
        customer = await create_customer(authenticated_client)

        response = await authenticated_client.post(
            f"/api/v1/customers/{customer['id']}/deactivate", json={}
        )

        assert response.status_code == 422

    async def test_deactivate_lead(self, authenticated_client: AsyncClient):
        lead = await create_lead(authenticated_client)

        response = await authenticated_client.post(
            f"/api/v1/customers/{lead['id']}/deactivate", json={"reason": "n/a"}
        )

        assert response.status_code == 404

    async def test_deactivate_twice(self, authenticated_client: AsyncClient):
        """Staying inactive is allowed; the reason is updated."""
        customer = await create_customer(authenticated_client)
        url = f"/api/v1/customers/{customer['id']}/deactivate"
        await authenticated_client.post(url, json={"reason": "Closed office"})

        response = await authenticated_client.post(url, json={"reason": "Bankrupt"})

        assert response.status_code == 200
        assert response.json()["churnReason"] == "Bankrupt"

    async def test_reactivate(self, authenticated_client: AsyncClient):
        customer = await create_customer(authenticated_client)
        await authenticated_client.post(
            f"/api/v1/customers/{customer['id']}/deactivate", json={"reason": "Paused"}
        )

        response = await authenticated_client.post(
            f"/api/v1/customers/{customer['id']}/reactivate"
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "active"
        assert data["reactivationDate"] is not None
        assert data["customerUntil"] is None

    async def test_reactivate_active_customer(self, authenticated_client: AsyncClient):
        customer = await create_customer(authenticated_client)

        response = await authenticated_client.post(
            f"/api/v1/customers/{customer['id']}/reactivate"
        )

        assert response.status_code == 409
        assert response.json()["type"].endswith("/errors/already_active")

    async def test_competitor_switch_is_final(self, authenticated_client: AsyncClient):
        customer = await create_customer(authenticated_client, status="competitor_switch")

        response = await authenticated_client.post(
            f"/api/v1/customers/{customer['id']}/reactivate"
        )

        assert response.status_code == 409
        assert response.json()["type"].endswith("/errors/invalid_status_transition")


class TestActivities:
    async def test_log_and_list(self, authenticated_client: AsyncClient, user: User):
        lead = await create_lead(authenticated_client)
        url = f"/api/v1/business-records/{lead['id']}/activities"

        created = await authenticated_client.post(
            url,
            json={
                "activityType": "call",
                "subject": "Intro call",
                "direction": "outbound",
                "completedDate": "2026-10-01T15:00:00Z",
            },
        )

        assert created.status_code == 201
        activity = created.json()
        assert activity["businessRecordId"] == lead["id"]
        assert activity["activityType"] == "call"
        assert activity["createdBy"] == str(user.id)

        listed = await authenticated_client.get(url)
        assert [a["id"] for a in listed.json()] == [activity["id"]]

        record = await authenticated_client.get(f"/api/v1/business-records/{lead['id']}")
        assert record.json()["lastContactDate"].startswith("2026-10-01T15:00:00")

    async def test_invalid_activity_type(self, authenticated_client: AsyncClient):
        lead = await create_lead(authenticated_client)

        response = await authenticated_client.post(
            f"/api/v1/business-records/{lead['id']}/activities",
            json={"activityType": "fax", "subject": "Sent brochure"},
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "activityType"

    async def test_record_id_in_body_is_ignored(self, authenticated_client: AsyncClient):
        lead = await create_lead(authenticated_client)
        other = await create_lead(authenticated_client)

        response = await authenticated_client.post(
            f"/api/v1/business-records/{lead['id']}/activities",
            json={"activityType": "note", "subject": "Met at expo", "businessRecordId": other["id"]},
        )

        assert response.status_code == 201
        assert response.json()["businessRecordId"] == lead["id"]

    async def test_activities_of_missing_record(self, authenticated_client: AsyncClient):
        response = await authenticated_client.get(
            f"/api/v1/business-records/{uuid4()}/activities"
        )

        assert response.status_code == 404
