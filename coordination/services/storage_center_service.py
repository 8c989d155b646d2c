"""Storage center service: inventory, operating hours and expiry sweeps."""

import logging
from collections.abc import Callable
from datetime import date, datetime
from uuid import UUID

from django.utils import timezone

from coordination.domain.errors import StorageCenterNotFoundError
from coordination.domain.models import Item, StorageCenter, Transaction
from coordination.domain.value_objects import StorageCenterId, TimeSlot
from coordination.services._ids import parse_id
from coordination.stores.interfaces import StorageCenterStore

logger = logging.getLogger(__name__)


class StorageCenterService:
    """Service for storage center administration.

    ``clock`` decides what "now" means for expiry checks; tests pass a fixed one.
    """

    def __init__(
        self,
        store: StorageCenterStore,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._store = store
        self._clock = clock

    def create_storage_center(
        self,
        *,
        name: str,
        description: str,
        organization_id: UUID | None = None,
    ) -> StorageCenter:
        """Create an empty storage center with an empty transaction history.

        Raises:
            ValidationError: If the name or description is blank.
        """
        center = StorageCenter(name=name, description=description)
        center.set_organization(organization_id)
        center.set_transactions([])
        saved = self._store.save_storage_center(center)
        logger.info("Created storage center %s (%s)", saved.id.value, saved.name)
        return saved

    def list_storage_centers(self) -> list[StorageCenter]:
        """Return all storage centers."""
        return self._store.list_storage_centers()

    def get_storage_center(self, storage_center_id: str) -> StorageCenter:
        """Return a storage center by ID.

        Raises:
            InvalidIdError: If the storage_center_id is not a valid UUID.
            StorageCenterNotFoundError: If the storage center does not exist.
        """
        center = self._store.get_storage_center(parse_id(StorageCenterId, storage_center_id))
        if center is None:
            raise StorageCenterNotFoundError()
        return center

    def update_storage_center(
        self,
        storage_center_id: str,
        *,
        name: str | None = None,
        description: str | None = None,
    ) -> StorageCenter:
        """Rename and/or re-describe a storage center. Omitted fields are kept."""
        center = self.get_storage_center(storage_center_id)
        if name is not None:
            center.change_name(name)
        if description is not None:
            center.change_description(description)
        return self._store.save_storage_center(center)

    def update_day_hours(
        self,
        storage_center_id: str,
        *,
        day: int,
        start_time: str,
        end_time: str,
    ) -> StorageCenter:
        """Replace the opening hours for one ISO day of week (1 = Monday).

        Raises:
            ValidationError: If the day is outside 1-7 or the time range is invalid.
        """
        center = self.get_storage_center(storage_center_id)
        center.update_day_hours(TimeSlot.from_strings(start_time, end_time), day)
        saved = self._store.save_storage_center(center)
        logger.info("Updated hours of storage center %s for day %d", saved.id.value, day)
        return saved

    def add_item(
        self,
        storage_center_id: str,
        *,
        description: str,
        quantity: int,
        expiration_date: date | None = None,
    ) -> StorageCenter:
        """Add a donated item to a storage center."""
        center = self.get_storage_center(storage_center_id)
        center.add_item(
            Item(description=description, quantity=quantity, expiration_date=expiration_date)
        )
        saved = self._store.save_storage_center(center)
        logger.info("Added %d x %s to storage center %s", quantity, description, saved.id.value)
        return saved

    def get_expired_items(self, storage_center_id: str) -> list[Item]:
        center = self.get_storage_center(storage_center_id)
        return center.get_expired_items(self._clock())

    def remove_expired_items(self, storage_center_id: str) -> list[Transaction]:
        """Purge expired items, recording one audit transaction per item.

        Raises:
            StateError: If the center has no transaction history assigned.
        """
        center = self.get_storage_center(storage_center_id)
        recorded = center.remove_expired_items(self._clock())
        saved = self._store.save_storage_center(center)
        logger.info(
            "Removed %d expired item(s) from storage center %s",
            len(recorded),
            center.id.value,
        )
        recorded_ids = {record.id for record in recorded}
        return [record for record in saved.transactions if record.id in recorded_ids]
