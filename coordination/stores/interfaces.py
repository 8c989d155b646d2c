"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from coordination.domain import (
    Event,
    EventId,
    StorageCenter,
    StorageCenterId,
    Volunteer,
    VolunteerId,
)


class StorageCenterStore(ABC):
    """Interface for storage center persistence operations.

    A loaded storage center always has its transaction history assigned.
    """

    @abstractmethod
    def list_storage_centers(self) -> list[StorageCenter]:
        """Return all storage centers ordered by name."""
        ...

    @abstractmethod
    def get_storage_center(self, storage_center_id: StorageCenterId) -> StorageCenter | None:
        """Return a storage center by ID, or None if not found."""
        ...

    @abstractmethod
    def save_storage_center(self, storage_center: StorageCenter) -> StorageCenter:
        """Persist hours, items and new transactions; return the stored center."""
        ...


class VolunteerStore(ABC):
    """Interface for volunteer persistence operations."""

    @abstractmethod
    def list_volunteers(self) -> list[Volunteer]:
        """Return all volunteers ordered by name."""
        ...

    @abstractmethod
    def get_volunteer(self, volunteer_id: VolunteerId) -> Volunteer | None:
        """Return a volunteer by ID, or None if not found."""
        ...

    @abstractmethod
    def save_volunteer(self, volunteer: Volunteer) -> Volunteer:
        """Persist a volunteer and return it with its ID assigned."""
        ...

    @abstractmethod
    def delete_volunteer(self, volunteer_id: VolunteerId) -> bool:
        """Delete a volunteer without touching events. Return False if absent."""
        ...


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by created_at descending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def find_events_by_date(self, date: str) -> list[Event]:
        """Return events scheduled on an MM-DD-YYYY date."""
        ...

    @abstractmethod
    def find_events_by_location(self, location: str) -> list[Event]:
        """Return events held at a location (case-insensitive match)."""
        ...

    @abstractmethod
    def save_event(self, event: Event) -> Event:
        """Persist an event with its roster and return it with its ID assigned."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Delete an event, leaving volunteers and storage center intact."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...
