from django.urls import path

from coordination.handlers import (
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

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/volunteers",
        EventVolunteerListView.as_view(),
        name="event-volunteer-list",
    ),
    path(
        "events/<str:event_id>/volunteers/<str:volunteer_id>",
        EventVolunteerDetailView.as_view(),
        name="event-volunteer-detail",
    ),
    path("storage-centers", StorageCenterListView.as_view(), name="storage-center-list"),
    path(
        "storage-centers/<str:storage_center_id>",
        StorageCenterDetailView.as_view(),
        name="storage-center-detail",
    ),
    path(
        "storage-centers/<str:storage_center_id>/hours/<int:day>",
        StorageCenterHoursView.as_view(),
        name="storage-center-hours",
    ),
    path(
        "storage-centers/<str:storage_center_id>/items",
        StorageCenterItemListView.as_view(),
        name="storage-center-items",
    ),
    path(
        "storage-centers/<str:storage_center_id>/expired-items",
        ExpiredItemListView.as_view(),
        name="storage-center-expired-items",
    ),
    path("volunteers", VolunteerListView.as_view(), name="volunteer-list"),
    path("volunteers/<str:volunteer_id>", VolunteerDetailView.as_view(), name="volunteer-detail"),
]
