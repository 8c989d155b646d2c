from coordination.domain.models import Event, Item, StorageCenter, Transaction, Volunteer
from coordination.domain.value_objects import (
    EventId,
    ItemId,
    Quantity,
    StorageCenterId,
    TimeSlot,
    TransactionId,
    VolunteerId,
)

__all__ = [
    "Event",
    "Item",
    "StorageCenter",
    "Transaction",
    "Volunteer",
    "EventId",
    "ItemId",
    "StorageCenterId",
    "TransactionId",
    "VolunteerId",
    "Quantity",
    "TimeSlot",
]
