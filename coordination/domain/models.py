"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in coordination/models.py (persistence layer).
"""

import calendar
from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID, uuid4

from coordination.domain.errors import StateError, ValidationError
from coordination.domain.value_objects import (
    EventId,
    ItemId,
    Quantity,
    StorageCenterId,
    TimeSlot,
    TransactionId,
    VolunteerId,
)

DATE_FORMAT = "%m-%d-%Y"
EXPIRED_ITEM_REASON = "Remove Expired Item"
NO_VOLUNTEERS_LINE = "No volunteers signed up yet."


def _require_text(value: str | None, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value


def normalize_event_date(value: str | None) -> str:
    """Return ``value`` as a zero-padded MM-DD-YYYY string.

    Raises:
        ValidationError: If the value is blank or not a MM-DD-YYYY date.
    """
    _require_text(value, "Event date cannot be blank")
    try:
        parsed = datetime.strptime(value.strip(), DATE_FORMAT)
    except (TypeError, ValueError) as exc:
        raise ValidationError("Event date must use the MM-DD-YYYY format") from exc
    return f"{parsed.month:02d}-{parsed.day:02d}-{parsed.year:04d}"


def day_name(day: int) -> str:
    """Return the upper-case English name for an ISO day of week (1 = Monday)."""
    return calendar.day_name[day - 1].upper()


@dataclass(eq=False)
class Volunteer:
    """Domain representation of a Volunteer.

    Rosters key volunteers by name, so equality and hashing follow the name.
    Two people sharing a name are indistinguishable to a roster; stores keep
    ``id`` as the surrogate identity.
    """

    name: str
    role: str
    join_date: str
    event_ids: set[EventId] = field(default_factory=set)
    id: VolunteerId | None = None

    def __post_init__(self) -> None:
        _require_text(self.name, "Volunteer name cannot be blank")

    @property
    def identity(self) -> str:
        return self.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Volunteer):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


@dataclass(eq=False)
class Item:
    """Domain representation of a donated Item, owned by one StorageCenter."""

    description: str
    quantity: Quantity
    expiration_date: date | None = None
    id: ItemId | None = None

    def __post_init__(self) -> None:
        _require_text(self.description, "Item description cannot be blank")
        if not isinstance(self.quantity, Quantity):
            self.quantity = Quantity(self.quantity)

    def is_expired(self, as_of: datetime) -> bool:
        if self.expiration_date is None:
            return False
        return self.expiration_date < as_of.date()

    def __str__(self) -> str:
        expires = self.expiration_date.isoformat() if self.expiration_date else "never"
        return f"{self.description} (quantity: {self.quantity.value}, expires: {expires})"


@dataclass(frozen=True)
class Transaction:
    """Immutable audit record of an inventory-affecting action."""

    storage_center_id: StorageCenterId | None
    item_id: ItemId | None
    item_description: str
    quantity: int
    reason: str
    created_at: datetime
    id: TransactionId | None = None


class StorageCenter:
    """Inventory and scheduling container for donated goods.

    Owns its items, its weekly operating hours and its transaction history.
    The transaction history is assigned once, either by a store when the
    center is loaded or by the caller for a brand new center.
    """

    def __init__(
        self,
        name: str,
        description: str,
        id: StorageCenterId | None = None,
        organization_id: UUID | None = None,
    ) -> None:
        self._name = _require_text(name, "Storage center name cannot be blank")
        self._description = _require_text(
            description, "Storage center description cannot be blank"
        )
        self.id = id
        self.organization_id = organization_id
        self._operating_hours: dict[int, TimeSlot] = {}
        self._items: list[Item] = []
        self._transactions: list[Transaction] | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def operating_hours(self) -> dict[int, TimeSlot]:
        return dict(sorted(self._operating_hours.items()))

    @property
    def items(self) -> tuple[Item, ...]:
        return tuple(self._items)

    @property
    def transactions(self) -> tuple[Transaction, ...] | None:
        if self._transactions is None:
            return None
        return tuple(self._transactions)

    def change_name(self, name: str) -> None:
        self._name = _require_text(name, "Storage center name cannot be blank")

    def change_description(self, description: str) -> None:
        self._description = _require_text(
            description, "Storage center description cannot be blank"
        )

    def set_organization(self, organization_id: UUID | None) -> None:
        self.organization_id = organization_id

    def update_day_hours(self, time_slot: TimeSlot, day: int) -> None:
        """Set the opening hours for an ISO day of week, replacing any previous slot."""
        if not isinstance(day, int) or isinstance(day, bool) or not 1 <= day <= 7:
            raise ValidationError("Day of the week must be between 1 and 7")
        if not isinstance(time_slot, TimeSlot):
            raise ValidationError("Operating hours require a time slot")
        self._operating_hours[day] = time_slot

    def is_open_at(self, moment: datetime) -> bool:
        slot = self._operating_hours.get(moment.isoweekday())
        return slot is not None and slot.contains(moment.time())

    def add_item(self, item: Item) -> None:
        self._items.append(item)

    def get_expired_items(self, as_of: datetime) -> list[Item]:
        return [item for item in self._items if item.is_expired(as_of)]

    def remove_expired_items(self, as_of: datetime) -> list[Transaction]:
        """Record a removal transaction for every expired item, then drop the items.

        Raises:
            StateError: If the transaction history was never assigned.
        """
        if self._transactions is None:
            raise StateError("Transactions must be set before removing expired items")

        expired = self.get_expired_items(as_of)
        recorded = [
            Transaction(
                storage_center_id=self.id,
                item_id=item.id,
                item_description=item.description,
                quantity=item.quantity.value,
                reason=EXPIRED_ITEM_REASON,
                created_at=as_of,
                id=TransactionId(uuid4()),
            )
            for item in expired
        ]
        self._transactions.extend(recorded)
        self._items = [item for item in self._items if item not in expired]
        return recorded

    def set_transactions(self, transactions: list[Transaction] | None) -> None:
        if transactions is None:
            raise ValidationError("Transactions must not be absent")
        if self._transactions is not None:
            raise StateError("Transactions have already been set")
        self._transactions = list(transactions)

    def describe_items(self) -> str:
        lines = ["Items: "]
        lines.extend(str(item) for item in self._items)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        lines = [
            f"Storage Center Name: {self._name}",
            f"Description: {self._description}",
            "Operating Hours: ",
        ]
        for day, slot in self.operating_hours.items():
            lines.append(f"{day_name(day)}: {slot}")
        return "\n".join(lines) + "\n"


class Event:
    """Scheduled activity hosted at a StorageCenter.

    The roster maps volunteer identity to Volunteer. The storage center and the
    volunteers are referenced, never owned.
    """

    def __init__(
        self,
        name: str,
        description: str,
        date: str,
        time_slot: TimeSlot,
        location: str,
        storage_center: StorageCenter,
        roster: dict[str, Volunteer] | None = None,
        id: EventId | None = None,
    ) -> None:
        if storage_center is None:
            raise ValidationError("Event requires a storage center")
        self._name = _require_text(name, "Event name cannot be blank")
        self._description = _require_text(description, "Event description cannot be blank")
        self._date = normalize_event_date(date)
        self._time_slot = self._require_time_slot(time_slot)
        self._location = _require_text(location, "Event location cannot be blank")
        self.storage_center = storage_center
        self.id = id
        self._roster: dict[str, Volunteer] = {}
        for volunteer in (roster or {}).values():
            self.add_volunteer(volunteer)

    @staticmethod
    def _require_time_slot(time_slot: TimeSlot | None) -> TimeSlot:
        if not isinstance(time_slot, TimeSlot):
            raise ValidationError("Event time must be a time slot")
        return time_slot

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def date(self) -> str:
        return self._date

    @property
    def time_slot(self) -> TimeSlot:
        return self._time_slot

    @property
    def location(self) -> str:
        return self._location

    @property
    def roster(self) -> dict[str, Volunteer]:
        return dict(self._roster)

    @property
    def volunteer_count(self) -> int:
        return len(self._roster)

    def update_name(self, name: str) -> None:
        self._name = _require_text(name, "Event name cannot be blank")

    def update_description(self, description: str) -> None:
        self._description = _require_text(description, "Event description cannot be blank")

    def update_date(self, date: str) -> None:
        self._date = normalize_event_date(date)

    def update_time(self, time_slot: TimeSlot) -> None:
        self._time_slot = self._require_time_slot(time_slot)

    def update_location(self, location: str) -> None:
        self._location = _require_text(location, "Event location cannot be blank")

    def add_volunteer(self, volunteer: Volunteer) -> None:
        """Insert or replace the roster entry for the volunteer's identity."""
        self._roster[volunteer.identity] = volunteer
        if self.id is not None:
            volunteer.event_ids.add(self.id)

    def remove_volunteer(self, identity: str) -> None:
        """Drop the roster entry for ``identity``; unknown identities are ignored."""
        volunteer = self._roster.pop(identity, None)
        if volunteer is not None and self.id is not None:
            volunteer.event_ids.discard(self.id)

    def __str__(self) -> str:
        lines = [
            f"Event Name: {self._name}",
            f"Description: {self._description}",
            f"Date: {self._date}",
            f"Time: {self._time_slot}",
            f"Location: {self._location}",
            f"Organizer: {self.storage_center.name}",
        ]
        if self._roster:
            lines.append("Volunteer Names: ")
            lines.extend(f"- {name}" for name in self._roster)
        else:
            lines.append(NO_VOLUNTEERS_LINE)
        return "\n".join(lines) + "\n"
