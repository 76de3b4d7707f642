"""Unit tests for RFC 7807 error responses."""

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError

from dealerdesk.core.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    register_exception_handlers,
)


class Item(BaseModel):
    name: str
    quantity: int


def make_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/not-found")
    async def not_found():
        raise NotFoundError("Equipment not found", resource="equipment", resource_id="42")

    @app.get("/conflict")
    async def conflict():
        raise ConflictError(
            "Cannot change status", error_code="invalid_status_transition",
            details={"allowed": ["contacted", "lost"]},
        )

    @app.get("/invalid")
    async def invalid():
        raise ValidationError(
            "Invalid equipment data",
            errors=[{"field": "customerId", "message": "Customer not found"}],
        )

    @app.get("/integrity")
    async def integrity():
        raise IntegrityError("INSERT ...", {"serial_number": "SN-1"}, Exception("duplicate key"))

    @app.get("/boom", tags=["equipment"])
    async def boom():
        raise RuntimeError("database password is hunter2")

    @app.post("/items")
    async def create_item(item: Item) -> Item:
        return item

    return app


def client_for(app: FastAPI) -> AsyncClient:
    return AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    )


class TestProblemDetails:
    async def test_not_found(self):
        async with client_for(make_app()) as client:
            response = await client.get("/not-found")

        assert response.status_code == 404
        body = response.json()
        assert body["title"] == "Not Found"
        assert body["detail"] == "Equipment not found"
        assert body["status"] == 404
        assert body["instance"] == "/not-found"
        assert body["type"].endswith("/errors/not_found")
        assert body["resource"] == "equipment"
        assert body["resource_id"] == "42"

    async def test_conflict_details_are_merged(self):
        async with client_for(make_app()) as client:
            response = await client.get("/conflict")

        assert response.status_code == 409
        body = response.json()
        assert body["type"].endswith("/errors/invalid_status_transition")
        assert body["allowed"] == ["contacted", "lost"]

    async def test_domain_validation_error(self):
        async with client_for(make_app()) as client:
            response = await client.get("/invalid")

        assert response.status_code == 422
        assert response.json()["errors"] == [
            {"field": "customerId", "message": "Customer not found"}
        ]

    async def test_request_validation_error(self):
        async with client_for(make_app()) as client:
            response = await client.post("/items", json={"name": "Toner"})

        assert response.status_code == 422
        body = response.json()
        assert body["title"] == "Validation Error"
        assert [error["field"] for error in body["errors"]] == ["quantity"]

    async def test_integrity_error_is_generic_conflict(self):
        async with client_for(make_app()) as client:
            response = await client.get("/integrity")

        assert response.status_code == 409
        assert "SN-1" not in response.text
        assert response.json()["detail"] == "The request conflicts with existing data"

    async def test_unexpected_error_hides_message(self):
        async with client_for(make_app()) as client:
            response = await client.get("/boom")

        assert response.status_code == 500
        assert "hunter2" not in response.text
        assert response.json()["detail"] == "An unexpected error occurred"
