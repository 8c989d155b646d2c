from coordination.handlers.views import (
    EventDetailView,
    EventListView,
    EventVolunteerDetailView,
    EventVolunteerListView,
    ExpiredItemListView,
    StorageCenterDetailView,
    StorageCenterHoursView,
    StorageCenterItemListView,
    StorageCenterListView,
    VolunteerDetailView,
    VolunteerListView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "EventVolunteerListView",
    "EventVolunteerDetailView",
    "StorageCenterListView",
    "StorageCenterDetailView",
    "StorageCenterHoursView",
    "StorageCenterItemListView",
    "ExpiredItemListView",
    "VolunteerListView",
    "VolunteerDetailView",
]
