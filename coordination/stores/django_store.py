"""Django ORM implementation of the stores.

Each store converts between ORM rows and domain models; nothing outside this
module touches the ORM directly.
"""

from django.db import transaction
from django.db.models import Prefetch

from coordination import models
from coordination.domain import (
    Event,
    EventId,
    Item,
    ItemId,
    StorageCenter,
    StorageCenterId,
    TimeSlot,
    Transaction,
    TransactionId,
    Volunteer,
    VolunteerId,
)
from coordination.domain.errors import StateError
from coordination.stores.interfaces import EventStore, StorageCenterStore, VolunteerStore

_STORAGE_CENTER_PREFETCH = ("operating_hours", "items", "transactions")


def _storage_center_to_domain(row: models.StorageCenter) -> StorageCenter:
    center = StorageCenter(
        name=row.name,
        description=row.description,
        id=StorageCenterId(row.id),
        organization_id=row.organization_id,
    )
    for hours in row.operating_hours.all():
        center.update_day_hours(TimeSlot(hours.start_time, hours.end_time), hours.day_of_week)
    for item in row.items.all():
        center.add_item(
            Item(
                description=item.description,
                quantity=item.quantity,
                expiration_date=item.expiration_date,
                id=ItemId(item.id),
            )
        )
    center.set_transactions(
        [
            Transaction(
                storage_center_id=center.id,
                item_id=ItemId(record.item_id) if record.item_id else None,
                item_description=record.item_description,
                quantity=record.quantity,
                reason=record.reason,
                created_at=record.created_at,
                id=TransactionId(record.id),
            )
            for record in row.transactions.all()
        ]
    )
    return center


def _volunteer_to_domain(row: models.Volunteer) -> Volunteer:
    return Volunteer(
        name=row.name,
        role=row.role,
        join_date=row.join_date,
        event_ids={EventId(event.id) for event in row.events.all()},
        id=VolunteerId(row.id),
    )


def _event_to_domain(row: models.Event) -> Event:
    event = Event(
        name=row.name,
        description=row.description,
        date=row.date,
        time_slot=TimeSlot(row.start_time, row.end_time),
        location=row.location,
        storage_center=_storage_center_to_domain(row.storage_center),
        id=EventId(row.id),
    )
    for volunteer in row.volunteers.all():
        event.add_volunteer(_volunteer_to_domain(volunteer))
    return event


class DjangoStorageCenterStore(StorageCenterStore):
    """Relational storage center store using Django ORM."""

    def _queryset(self):
        return models.StorageCenter.objects.prefetch_related(*_STORAGE_CENTER_PREFETCH)

    def list_storage_centers(self) -> list[StorageCenter]:
        return [_storage_center_to_domain(row) for row in self._queryset()]

    def get_storage_center(self, storage_center_id: StorageCenterId) -> StorageCenter | None:
        row = self._queryset().filter(pk=storage_center_id.value).first()
        if row is None:
            return None
        return _storage_center_to_domain(row)

    @transaction.atomic
    def save_storage_center(self, storage_center: StorageCenter) -> StorageCenter:
        fields = {
            "name": storage_center.name,
            "description": storage_center.description,
            "organization_id": storage_center.organization_id,
        }
        if storage_center.id is None:
            row = models.StorageCenter.objects.create(**fields)
            storage_center.id = StorageCenterId(row.id)
        else:
            row, _ = models.StorageCenter.objects.update_or_create(
                pk=storage_center.id.value, defaults=fields
            )

        row.operating_hours.all().delete()
        models.OperatingHours.objects.bulk_create(
            models.OperatingHours(
                storage_center=row,
                day_of_week=day,
                start_time=slot.start,
                end_time=slot.end,
            )
            for day, slot in storage_center.operating_hours.items()
        )

        # Audit rows go in before item rows disappear so they can still link to them.
        known_items = set(row.items.values_list("id", flat=True))
        persisted = set(row.transactions.values_list("id", flat=True))
        for record in storage_center.transactions or ():
            if record.id is not None and record.id.value in persisted:
                continue
            item_id = record.item_id.value if record.item_id else None
            models.Transaction.objects.create(
                id=record.id.value if record.id else None,
                storage_center=row,
                item_id=item_id if item_id in known_items else None,
                item_description=record.item_description,
                quantity=record.quantity,
                reason=record.reason,
                created_at=record.created_at,
            )

        kept = {item.id.value for item in storage_center.items if item.id is not None}
        row.items.exclude(pk__in=kept).delete()
        for item in storage_center.items:
            if item.id is not None:
                continue
            created = models.Item.objects.create(
                storage_center=row,
                description=item.description,
                quantity=item.quantity.value,
                expiration_date=item.expiration_date,
            )
            item.id = ItemId(created.id)

        return self.get_storage_center(storage_center.id)


class DjangoVolunteerStore(VolunteerStore):
    """Relational volunteer store using Django ORM."""

    def _queryset(self):
        return models.Volunteer.objects.prefetch_related("events")

    def list_volunteers(self) -> list[Volunteer]:
        return [_volunteer_to_domain(row) for row in self._queryset()]

    def get_volunteer(self, volunteer_id: VolunteerId) -> Volunteer | None:
        row = self._queryset().filter(pk=volunteer_id.value).first()
        if row is None:
            return None
        return _volunteer_to_domain(row)

    def save_volunteer(self, volunteer: Volunteer) -> Volunteer:
        fields = {
            "name": volunteer.name,
            "role": volunteer.role,
            "join_date": volunteer.join_date,
        }
        if volunteer.id is None:
            row = models.Volunteer.objects.create(**fields)
            volunteer.id = VolunteerId(row.id)
        else:
            models.Volunteer.objects.update_or_create(pk=volunteer.id.value, defaults=fields)
        return volunteer

    def delete_volunteer(self, volunteer_id: VolunteerId) -> bool:
        deleted, _ = models.Volunteer.objects.filter(pk=volunteer_id.value).delete()
        return deleted > 0


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def _queryset(self):
        return models.Event.objects.select_related("storage_center").prefetch_related(
            *(f"storage_center__{name}" for name in _STORAGE_CENTER_PREFETCH),
            Prefetch("volunteers", queryset=models.Volunteer.objects.prefetch_related("events")),
        )

    def list_events(self) -> list[Event]:
        return [_event_to_domain(row) for row in self._queryset()]

    def get_event(self, event_id: EventId) -> Event | None:
        row = self._queryset().filter(pk=event_id.value).first()
        if row is None:
            return None
        return _event_to_domain(row)

    def find_events_by_date(self, date: str) -> list[Event]:
        return [_event_to_domain(row) for row in self._queryset().filter(date=date)]

    def find_events_by_location(self, location: str) -> list[Event]:
        return [
            _event_to_domain(row)
            for row in self._queryset().filter(location__iexact=location)
        ]

    @transaction.atomic
    def save_event(self, event: Event) -> Event:
        if event.storage_center.id is None:
            raise StateError("Storage center must be saved before its events")
        fields = {
            "name": event.name,
            "description": event.description,
            "date": event.date,
            "start_time": event.time_slot.start,
            "end_time": event.time_slot.end,
            "location": event.location,
            "storage_center_id": event.storage_center.id.value,
        }
        if event.id is None:
            row = models.Event.objects.create(**fields)
            event.id = EventId(row.id)
        else:
            row, _ = models.Event.objects.update_or_create(pk=event.id.value, defaults=fields)

        roster = list(event.roster.values())
        row.volunteers.set([volunteer.id.value for volunteer in roster if volunteer.id is not None])
        for volunteer in roster:
            volunteer.event_ids.add(event.id)
        return event

    def delete_event(self, event_id: EventId) -> bool:
        deleted, _ = models.Event.objects.filter(pk=event_id.value).delete()
        return deleted > 0

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(pk=event_id.value).exists()
