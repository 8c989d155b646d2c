"""Volunteer service: registration and administrative removal."""

import logging

from coordination.domain.errors import VolunteerNotFoundError
from coordination.domain.models import Volunteer
from coordination.domain.value_objects import VolunteerId
from coordination.services._ids import parse_id
from coordination.stores.interfaces import VolunteerStore

logger = logging.getLogger(__name__)


class VolunteerService:
    """Service for volunteer registration."""

    def __init__(self, store: VolunteerStore) -> None:
        self._store = store

    def register_volunteer(self, *, name: str, role: str, join_date: str) -> Volunteer:
        """Register a new volunteer.

        Raises:
            ValidationError: If the name is blank.
        """
        volunteer = self._store.save_volunteer(
            Volunteer(name=name, role=role, join_date=join_date)
        )
        logger.info("Registered volunteer %s", volunteer.id.value)
        return volunteer

    def list_volunteers(self) -> list[Volunteer]:
        return self._store.list_volunteers()

    def get_volunteer(self, volunteer_id: str) -> Volunteer:
        """Return a volunteer by ID.

        Raises:
            InvalidIdError: If the volunteer_id is not a valid UUID.
            VolunteerNotFoundError: If the volunteer does not exist.
        """
        volunteer = self._store.get_volunteer(parse_id(VolunteerId, volunteer_id))
        if volunteer is None:
            raise VolunteerNotFoundError()
        return volunteer

    def remove_volunteer(self, volunteer_id: str) -> None:
        """Delete a volunteer. Event rosters simply lose the entry."""
        parsed = parse_id(VolunteerId, volunteer_id)
        if not self._store.delete_volunteer(parsed):
            raise VolunteerNotFoundError()
        logger.info("Removed volunteer %s", parsed.value)
