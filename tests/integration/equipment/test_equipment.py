"""Integration tests for the equipment endpoints."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

from dealerdesk.modules.users.models import User
from tests.factories import BusinessRecordPayloadFactory


pytestmark = pytest.mark.integration

EQUIPMENT = "/api/v1/equipment"


@pytest.fixture
async def customer(authenticated_client: AsyncClient) -> dict:
    response = await authenticated_client.post(
        "/api/v1/business-records",
        json=BusinessRecordPayloadFactory.build().model_dump(by_alias=True),
    )
    return response.json()


def device(customer: dict, **fields) -> dict:
    return {
        "customerId": customer["id"],
        "serialNumber": f"SN-{uuid4().hex[:8]}",
        "manufacturer": "Canon",
        "modelNumber": "imageRUNNER ADVANCE C5535i",
        "equipmentType": "mfp",
        **fields,
    }


class TestEquipment:
    async def test_register(self, authenticated_client: AsyncClient, customer: dict, user: User):
        response = await authenticated_client.post(
            EQUIPMENT,
            json=device(
                customer,
                serialNumber="2NX04512",
                purchasePrice=8450.5,
                currentMeterReading=12000,
            ),
        )

        assert response.status_code == 201
        data = response.json()
        assert data["serialNumber"] == "2NX04512"
        assert data["customerId"] == customer["id"]
        assert data["status"] == "active"
        assert data["purchasePrice"] == 8450.5
        assert data["currentMeterReading"] == 12000
        assert data["createdBy"] == str(user.id)

    async def test_serial_number_required(self, authenticated_client: AsyncClient, customer: dict):
        body = device(customer)
        del body["serialNumber"]

        response = await authenticated_client.post(EQUIPMENT, json=body)

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "serialNumber"

    async def test_unknown_customer(self, authenticated_client: AsyncClient, customer: dict):
        response = await authenticated_client.post(
            EQUIPMENT, json=device(customer, customerId=str(uuid4()))
        )

        assert response.status_code == 422
        assert response.json()["errors"] == [
            {"field": "customerId", "message": "Customer not found"}
        ]

    async def test_negative_meter_reading(
        self, authenticated_client: AsyncClient, customer: dict
    ):
        response = await authenticated_client.post(
            EQUIPMENT, json=device(customer, currentMeterReading=-1)
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "currentMeterReading"

    async def test_get_and_list(self, authenticated_client: AsyncClient, customer: dict):
        created = (await authenticated_client.post(EQUIPMENT, json=device(customer))).json()

        fetched = await authenticated_client.get(f"{EQUIPMENT}/{created['id']}")
        by_customer = await authenticated_client.get(
            EQUIPMENT, params={"customerId": customer["id"]}
        )
        retired = await authenticated_client.get(EQUIPMENT, params={"status": "retired"})

        assert fetched.json()["id"] == created["id"]
        assert [item["id"] for item in by_customer.json()] == [created["id"]]
        assert retired.json() == []

    async def test_get_missing(self, authenticated_client: AsyncClient):
        response = await authenticated_client.get(f"{EQUIPMENT}/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["resource"] == "equipment"

    async def test_update(self, authenticated_client: AsyncClient, customer: dict):
        created = (await authenticated_client.post(EQUIPMENT, json=device(customer))).json()

        response = await authenticated_client.put(
            f"{EQUIPMENT}/{created['id']}",
            json={
                "status": "retired",
                "previousMeterReading": 12000,
                "currentMeterReading": 15500,
                "serialNumber": None,
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "retired"
        assert data["currentMeterReading"] == 15500
        assert data["serialNumber"] == created["serialNumber"]

    async def test_update_to_unknown_customer(
        self, authenticated_client: AsyncClient, customer: dict
    ):
        created = (await authenticated_client.post(EQUIPMENT, json=device(customer))).json()

        response = await authenticated_client.put(
            f"{EQUIPMENT}/{created['id']}", json={"customerId": str(uuid4())}
        )

        assert response.status_code == 422
