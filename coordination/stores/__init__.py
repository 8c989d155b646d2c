from coordination.stores.django_store import (
    DjangoEventStore,
    DjangoStorageCenterStore,
    DjangoVolunteerStore,
)
from coordination.stores.interfaces import EventStore, StorageCenterStore, VolunteerStore

__all__ = [
    "EventStore",
    "StorageCenterStore",
    "VolunteerStore",
    "DjangoEventStore",
    "DjangoStorageCenterStore",
    "DjangoVolunteerStore",
]
