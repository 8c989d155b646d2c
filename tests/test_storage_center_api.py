"""Integration tests for the storage center endpoints.

The views use the real clock, so expiry dates sit far in the past or future.
Run with: pytest tests/test_storage_center_api.py -v
"""

import pytest
from rest_framework.test import APIClient

from coordination import models

MISSING_ID = "00000000-0000-4000-8000-000000000000"


@pytest.fixture
def pantry(api_client: APIClient) -> dict:
    response = api_client.post(
        "/api/storage-centers",
        {"name": "Food Pantry", "description": "Neighbourhood food bank"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.mark.django_db
class TestStorageCenterCreate:
    """Tests for POST /api/storage-centers"""

    def test_create_returns_empty_center(self, pantry: dict):
        assert pantry["name"] == "Food Pantry"
        assert pantry["organization_id"] is None
        assert pantry["operating_hours"] == {}
        assert pantry["items"] == []
        assert pantry["summary"] == (
            "Storage Center Name: Food Pantry\n"
            "Description: Neighbourhood food bank\n"
            "Operating Hours: \n"
        )

    def test_create_with_organization(self, api_client: APIClient):
        org_id = "6f1c2b7e-3f7a-4c55-9a51-0f3e8d1b2c4d"
        response = api_client.post(
            "/api/storage-centers",
            {"name": "Clothing Bank", "description": "Coats", "organization_id": org_id},
        )
        assert response.status_code == 201
        assert response.json()["organization_id"] == org_id

    def test_create_rejects_blank_name(self, api_client: APIClient):
        response = api_client.post("/api/storage-centers", {"name": " ", "description": "desc"})
        assert response.status_code == 400

    def test_list(self, api_client: APIClient, pantry: dict):
        response = api_client.get("/api/storage-centers")
        assert response.status_code == 200
        assert [center["id"] for center in response.json()] == [pantry["id"]]


@pytest.mark.django_db
class TestStorageCenterDetail:
    """Tests for GET/PATCH /api/storage-centers/{id}"""

    def test_get_not_found(self, api_client: APIClient):
        response = api_client.get(f"/api/storage-centers/{MISSING_ID}")
        assert response.status_code == 404
        assert response.json()["code"] == "STORAGE_CENTER_NOT_FOUND"

    def test_patch_keeps_omitted_fields(self, api_client: APIClient, pantry: dict):
        response = api_client.patch(
            f"/api/storage-centers/{pantry['id']}", {"name": "Clothing Bank"}
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Clothing Bank"
        assert response.json()["description"] == "Neighbourhood food bank"


@pytest.mark.django_db
class TestOperatingHoursApi:
    """Tests for PUT /api/storage-centers/{id}/hours/{day}"""

    def test_set_hours(self, api_client: APIClient, pantry: dict):
        response = api_client.put(
            f"/api/storage-centers/{pantry['id']}/hours/1",
            {"start_time": "10:00", "end_time": "11:00"},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["operating_hours"] == {"MONDAY": {"start": "10:00", "end": "11:00"}}
        assert body["summary"].endswith("MONDAY: 10:00 - 11:00\n")

    def test_day_out_of_range(self, api_client: APIClient, pantry: dict):
        response = api_client.put(
            f"/api/storage-centers/{pantry['id']}/hours/8",
            {"start_time": "10:00", "end_time": "11:00"},
        )
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_inverted_range(self, api_client: APIClient, pantry: dict):
        response = api_client.put(
            f"/api/storage-centers/{pantry['id']}/hours/2",
            {"start_time": "11:00", "end_time": "10:00"},
        )
        assert response.status_code == 400
        assert api_client.get(f"/api/storage-centers/{pantry['id']}").json()["operating_hours"] == {}


@pytest.mark.django_db
class TestExpiredItemsApi:
    """Tests for /api/storage-centers/{id}/items and /expired-items"""

    def add_item(self, api_client: APIClient, pantry: dict, description: str, expires: str):
        response = api_client.post(
            f"/api/storage-centers/{pantry['id']}/items",
            {"description": description, "quantity": 6, "expiration_date": expires},
        )
        assert response.status_code == 201
        return response.json()

    def test_add_item(self, api_client: APIClient, pantry: dict):
        body = self.add_item(api_client, pantry, "Rice", "2999-12-31")
        assert [(item["description"], item["quantity"]) for item in body["items"]] == [("Rice", 6)]

    def test_add_item_negative_quantity(self, api_client: APIClient, pantry: dict):
        response = api_client.post(
            f"/api/storage-centers/{pantry['id']}/items", {"description": "Rice", "quantity": -1}
        )
        assert response.status_code == 400

    def test_sweep_records_audit(self, api_client: APIClient, pantry: dict):
        self.add_item(api_client, pantry, "Milk", "2000-01-01")
        self.add_item(api_client, pantry, "Rice", "2999-12-31")
        url = f"/api/storage-centers/{pantry['id']}/expired-items"

        expired = api_client.get(url).json()
        assert [item["description"] for item in expired] == ["Milk"]

        response = api_client.delete(url)
        assert response.status_code == 200
        recorded = response.json()
        assert len(recorded) == 1
        assert recorded[0]["reason"] == "Remove Expired Item"
        assert recorded[0]["quantity"] == 6
        assert recorded[0]["item_description"] == "Milk"
        assert recorded[0]["id"] is not None

        center = api_client.get(f"/api/storage-centers/{pantry['id']}").json()
        assert [item["description"] for item in center["items"]] == ["Rice"]
        assert models.Transaction.objects.filter(storage_center_id=pantry["id"]).count() == 1

    def test_sweep_with_nothing_expired(self, api_client: APIClient, pantry: dict):
        self.add_item(api_client, pantry, "Rice", "2999-12-31")
        response = api_client.delete(f"/api/storage-centers/{pantry['id']}/expired-items")
        assert response.status_code == 200
        assert response.json() == []
