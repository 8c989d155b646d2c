"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging

from coordination.domain.errors import (
    EventNotFoundError,
    StorageCenterNotFoundError,
    VolunteerNotFoundError,
)
from coordination.domain.models import Event, Volunteer, normalize_event_date
from coordination.domain.value_objects import EventId, StorageCenterId, TimeSlot, VolunteerId
from coordination.services._ids import parse_id
from coordination.stores.interfaces import EventStore, StorageCenterStore, VolunteerStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for scheduling events and maintaining their rosters."""

    def __init__(
        self,
        store: EventStore,
        storage_center_store: StorageCenterStore,
        volunteer_store: VolunteerStore,
    ) -> None:
        self._store = store
        self._storage_center_store = storage_center_store
        self._volunteer_store = volunteer_store

    def create_event(
        self,
        *,
        name: str,
        description: str,
        date: str,
        start_time: str,
        end_time: str,
        location: str,
        storage_center_id: str,
    ) -> Event:
        """Create an event hosted at an existing storage center.

        Raises:
            InvalidIdError: If the storage_center_id is not a valid UUID.
            StorageCenterNotFoundError: If the storage center does not exist.
            ValidationError: If any event field or the time range is invalid.
        """
        center_id = parse_id(StorageCenterId, storage_center_id)
        storage_center = self._storage_center_store.get_storage_center(center_id)
        if storage_center is None:
            raise StorageCenterNotFoundError()

        event = Event(
            name=name,
            description=description,
            date=date,
            time_slot=TimeSlot.from_strings(start_time, end_time),
            location=location,
            storage_center=storage_center,
        )
        saved = self._store.save_event(event)
        logger.info("Created event %s at storage center %s", saved.id.value, center_id.value)
        return saved

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(parse_id(EventId, event_id))
        if event is None:
            raise EventNotFoundError()
        return event

    def remove_event(self, event_id: str) -> None:
        """Delete an event. Its volunteers and storage center are left untouched.

        Raises:
            InvalidIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_id(EventId, event_id)
        if not self._store.event_exists(parsed):
            raise EventNotFoundError()
        self._store.delete_event(parsed)
        logger.info("Removed event %s", parsed.value)

    def search_events_by_date(self, date: str) -> list[Event]:
        """Return events on ``date``; ``1-5-2024`` and ``01-05-2024`` match alike.

        Raises:
            ValidationError: If the date is not a MM-DD-YYYY date.
        """
        return self._store.find_events_by_date(normalize_event_date(date))

    def search_events_by_location(self, location: str) -> list[Event]:
        return self._store.find_events_by_location(location)

    def add_volunteer_to_event(self, event_id: str, volunteer_id: str) -> Event:
        """Sign a volunteer up for an event. Signing up twice is not an error.

        Raises:
            InvalidIdError: If either ID is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            VolunteerNotFoundError: If the volunteer does not exist.
        """
        event = self.get_event(event_id)
        volunteer = self._get_volunteer(volunteer_id)
        event.add_volunteer(volunteer)
        saved = self._store.save_event(event)
        logger.info(
            "Volunteer %s signed up for event %s (%d on roster)",
            volunteer.id.value,
            saved.id.value,
            saved.volunteer_count,
        )
        return saved

    def remove_volunteer_from_event(self, event_id: str, volunteer_id: str) -> Event:
        """Take a volunteer off an event roster. Non-members are ignored.

        Raises:
            InvalidIdError: If either ID is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            VolunteerNotFoundError: If the volunteer does not exist.
        """
        event = self.get_event(event_id)
        volunteer = self._get_volunteer(volunteer_id)
        event.remove_volunteer(volunteer.identity)
        saved = self._store.save_event(event)
        logger.info("Volunteer %s removed from event %s", volunteer.id.value, saved.id.value)
        return saved

    def _get_volunteer(self, volunteer_id: str) -> Volunteer:
        volunteer = self._volunteer_store.get_volunteer(parse_id(VolunteerId, volunteer_id))
        if volunteer is None:
            raise VolunteerNotFoundError()
        return volunteer
