from __future__ import annotations

from typing import AsyncIterator

import pytest
from fastapi.testclient import TestClient

from alderperson.errors import ElementNotFound, EnrichmentError, NoAlderpersonData, WardNotFound
from alderperson.server.app import WARD_LOOKUP_FAILED, app, get_service
from alderperson.types import LookupResponse


class StubService:
    def __init__(self, result: LookupResponse | None = None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.addresses: list[str] = []

    async def lookup(self, address: str) -> LookupResponse:
        self.addresses.append(address)
        if self.error is not None:
            raise self.error
        assert self.result is not None
        return self.result


@pytest.fixture
def client_for():
    def build(service: StubService) -> TestClient:
        async def override() -> AsyncIterator[StubService]:
            yield service

        app.dependency_overrides[get_service] = override
        return TestClient(app, raise_server_exceptions=False)

    yield build
    app.dependency_overrides.clear()


def test_api_test_endpoint(client_for) -> None:
    response = client_for(StubService()).get("/api/test")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Server is running!"
    assert "timestamp" in body


def test_lookup_success(client_for) -> None:
    result = LookupResponse(
        alderperson="Brendan Reilly",
        ward="42",
        contact="325 W Huron St",
        address="121 N LaSalle St",
        ward_office="325 W Huron St",
        ward_phone="(312) 642-4242",
    )
    service = StubService(result=result)

    response = client_for(service).post("/api/lookup", json={"address": "  121 N LaSalle St "})

    assert response.status_code == 200
    assert response.json()["wardPhone"] == "(312) 642-4242"
    assert service.addresses == ["121 N LaSalle St"]


@pytest.mark.parametrize("payload", [{}, {"address": ""}, {"address": "   "}])
def test_lookup_requires_address(client_for, payload: dict) -> None:
    service = StubService()

    response = client_for(service).post("/api/lookup", json=payload)

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Address is required"}
    assert service.addresses == []


@pytest.mark.parametrize("error", [ElementNotFound("no input"), WardNotFound("no ward")])
def test_lookup_failures_share_a_generic_message(client_for, error: Exception) -> None:
    response = client_for(StubService(error=error)).post("/api/lookup", json={"address": "1 Main St"})

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": WARD_LOOKUP_FAILED}


def test_lookup_without_alderperson_data(client_for) -> None:
    error = NoAlderpersonData("No alderperson data found for Ward 9.")

    response = client_for(StubService(error=error)).post("/api/lookup", json={"address": "1 Main St"})

    assert response.status_code == 404
    assert response.json()["error"] == "No alderperson data found for Ward 9."


@pytest.mark.parametrize("error", [EnrichmentError("portal down"), RuntimeError("unexpected")])
def test_lookup_internal_errors_return_500(client_for, error: Exception) -> None:
    response = client_for(StubService(error=error)).post("/api/lookup", json={"address": "1 Main St"})

    assert response.status_code == 500
    assert response.json()["success"] is False
