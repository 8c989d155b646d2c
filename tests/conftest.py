"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest
from rest_framework.test import APIClient

from coordination.domain import StorageCenter, TimeSlot, Volunteer
from tests.fakes import InMemoryEventStore, InMemoryStorageCenterStore, InMemoryVolunteerStore

API_KEY = "test-key"
NOW = datetime(2024, 12, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def api_keys(settings):
    settings.API_KEYS = [API_KEY]


@pytest.fixture
def api_client() -> APIClient:
    client = APIClient()
    client.credentials(HTTP_X_API_KEY=API_KEY)
    return client


@pytest.fixture
def anonymous_client() -> APIClient:
    return APIClient()


@pytest.fixture
def food_pantry() -> StorageCenter:
    center = StorageCenter("Food Pantry", "Neighbourhood food bank")
    center.set_transactions([])
    return center


@pytest.fixture
def morning_slot() -> TimeSlot:
    return TimeSlot.from_strings("10:00", "11:00")


@pytest.fixture
def john() -> Volunteer:
    return Volunteer("John Doe", "Cook", "10-17-2024")


@pytest.fixture
def jane() -> Volunteer:
    return Volunteer("Jane Smith", "Server", "10-18-2024")


@pytest.fixture
def storage_center_store() -> InMemoryStorageCenterStore:
    return InMemoryStorageCenterStore()


@pytest.fixture
def volunteer_store() -> InMemoryVolunteerStore:
    return InMemoryVolunteerStore()


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()
