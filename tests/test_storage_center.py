"""Unit tests for StorageCenter: hours, inventory and expired-item sweeps.

Run with: pytest tests/test_storage_center.py -v
"""

from datetime import date, datetime, timezone

import pytest

from coordination.domain import Item, StorageCenter, TimeSlot
from coordination.domain.errors import StateError, ValidationError
from coordination.domain.models import EXPIRED_ITEM_REASON
from tests.conftest import NOW


class TestStorageCenterNaming:
    """Tests for name and description validation."""

    def test_round_trips_name_and_description(self):
        center = StorageCenter("Food Pantry", "desc")
        assert center.name == "Food Pantry"
        assert center.description == "desc"

    @pytest.mark.parametrize("name, description", [("", "desc"), ("Food Pantry", " "), (None, "desc")])
    def test_rejects_blank_construction(self, name, description):
        with pytest.raises(ValidationError):
            StorageCenter(name, description)

    def test_change_name_and_description(self, food_pantry):
        food_pantry.change_name("Clothing Bank")
        food_pantry.change_description("Winter coats")
        assert food_pantry.name == "Clothing Bank"
        assert food_pantry.description == "Winter coats"

    def test_blank_change_keeps_previous_values(self, food_pantry):
        with pytest.raises(ValidationError):
            food_pantry.change_name("   ")
        with pytest.raises(ValidationError):
            food_pantry.change_description("")
        assert food_pantry.name == "Food Pantry"
        assert food_pantry.description == "Neighbourhood food bank"


class TestOperatingHours:
    """Tests for per-day opening hours."""

    @pytest.mark.parametrize("day", range(1, 8))
    def test_accepts_every_day_of_week(self, food_pantry, morning_slot, day):
        food_pantry.update_day_hours(morning_slot, day)
        assert food_pantry.operating_hours == {day: morning_slot}

    @pytest.mark.parametrize("day", [0, 8, -1])
    def test_rejects_day_out_of_range(self, food_pantry, morning_slot, day):
        with pytest.raises(ValidationError, match="between 1 and 7"):
            food_pantry.update_day_hours(morning_slot, day)
        assert food_pantry.operating_hours == {}

    def test_update_overwrites_existing_slot(self, food_pantry, morning_slot):
        afternoon = TimeSlot.from_strings("13:00", "17:00")
        food_pantry.update_day_hours(morning_slot, 1)
        food_pantry.update_day_hours(afternoon, 1)
        assert food_pantry.operating_hours == {1: afternoon}

    def test_is_open_at(self, food_pantry, morning_slot):
        food_pantry.update_day_hours(morning_slot, 1)
        monday = datetime(2024, 12, 2, 10, 30)
        assert food_pantry.is_open_at(monday)
        assert not food_pantry.is_open_at(monday.replace(hour=11))
        assert not food_pantry.is_open_at(datetime(2024, 12, 3, 10, 30))

    def test_display_lists_hours_by_day_name(self, food_pantry, morning_slot):
        food_pantry.update_day_hours(TimeSlot.from_strings("12:00", "14:00"), 3)
        food_pantry.update_day_hours(morning_slot, 1)
        assert str(food_pantry) == (
            "Storage Center Name: Food Pantry\n"
            "Description: Neighbourhood food bank\n"
            "Operating Hours: \n"
            "MONDAY: 10:00 - 11:00\n"
            "WEDNESDAY: 12:00 - 14:00\n"
        )


class TestExpiredItems:
    """Tests for the expired-item sweep and its audit trail."""

    def test_get_expired_items_returns_only_expired(self, food_pantry):
        spoiled = Item("Milk", 6, expiration_date=date(2024, 11, 1))
        fresh = Item("Rice", 10, expiration_date=date(2025, 6, 1))
        food_pantry.add_item(spoiled)
        food_pantry.add_item(fresh)
        food_pantry.add_item(Item("Blankets", 3))

        assert food_pantry.get_expired_items(NOW) == [spoiled]

    def test_remove_expired_items_records_transaction(self, food_pantry):
        spoiled = Item("Milk", 6, expiration_date=date(2024, 11, 1))
        fresh = Item("Rice", 10, expiration_date=date(2025, 6, 1))
        food_pantry.add_item(spoiled)
        food_pantry.add_item(fresh)

        recorded = food_pantry.remove_expired_items(NOW)

        assert food_pantry.items == (fresh,)
        assert len(recorded) == 1
        assert food_pantry.transactions == tuple(recorded)
        transaction = recorded[0]
        assert transaction.reason == EXPIRED_ITEM_REASON == "Remove Expired Item"
        assert transaction.quantity == 6
        assert transaction.item_description == "Milk"
        assert transaction.created_at == NOW
        assert transaction.id is not None

    def test_remove_without_transactions_raises_state_error(self):
        center = StorageCenter("Food Pantry", "desc")
        spoiled = Item("Milk", 6, expiration_date=date(2024, 11, 1))
        center.add_item(spoiled)

        with pytest.raises(StateError):
            center.remove_expired_items(NOW)
        assert center.items == (spoiled,)
        assert center.transactions is None

    def test_transactions_are_immutable(self, food_pantry):
        food_pantry.add_item(Item("Milk", 6, expiration_date=date(2024, 11, 1)))
        transaction = food_pantry.remove_expired_items(NOW)[0]
        with pytest.raises(AttributeError):
            transaction.quantity = 1

    def test_nothing_expired_records_nothing(self, food_pantry):
        food_pantry.add_item(Item("Rice", 10, expiration_date=date(2025, 6, 1)))
        assert food_pantry.remove_expired_items(NOW) == []
        assert food_pantry.transactions == ()
        assert len(food_pantry.items) == 1

    def test_uses_supplied_clock(self, food_pantry):
        food_pantry.add_item(Item("Rice", 10, expiration_date=date(2025, 6, 1)))
        later = datetime(2025, 6, 2, tzinfo=timezone.utc)
        assert len(food_pantry.get_expired_items(later)) == 1


class TestSetTransactions:
    """Tests for the one-time transaction history assignment."""

    def test_rejects_absent_transactions(self):
        center = StorageCenter("Food Pantry", "desc")
        with pytest.raises(ValidationError):
            center.set_transactions(None)

    def test_rejects_second_assignment(self, food_pantry):
        with pytest.raises(StateError, match="already been set"):
            food_pantry.set_transactions([])


class TestItemListing:
    def test_describe_items(self, food_pantry):
        food_pantry.add_item(Item("Rice", 10, expiration_date=date(2025, 6, 1)))
        food_pantry.add_item(Item("Blankets", 3))
        assert food_pantry.describe_items() == (
            "Items: \n"
            "Rice (quantity: 10, expires: 2025-06-01)\n"
            "Blankets (quantity: 3, expires: never)\n"
        )
