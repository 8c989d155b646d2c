"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Never contain business logic
- Never expose internal error details

Domain errors are mapped to responses by handlers.errors.domain_exception_handler.
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from coordination.handlers.serializers import (
    DayHoursSerializer,
    EventCreateSerializer,
    EventSerializer,
    EventVolunteerSerializer,
    ItemCreateSerializer,
    ItemSerializer,
    StorageCenterCreateSerializer,
    StorageCenterSerializer,
    StorageCenterUpdateSerializer,
    TransactionSerializer,
    VolunteerCreateSerializer,
    VolunteerSerializer,
)
from coordination.services import EventService, StorageCenterService, VolunteerService
from coordination.stores import (
    DjangoEventStore,
    DjangoStorageCenterStore,
    DjangoVolunteerStore,
)


def event_service() -> EventService:
    return EventService(DjangoEventStore(), DjangoStorageCenterStore(), DjangoVolunteerStore())


def storage_center_service() -> StorageCenterService:
    return StorageCenterService(DjangoStorageCenterStore())


def volunteer_service() -> VolunteerService:
    return VolunteerService(DjangoVolunteerStore())


def _validated(serializer_class, request: Request, partial: bool = False) -> dict:
    serializer = serializer_class(data=request.data, partial=partial)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


class EventListView(APIView):
    """Handler for GET/POST /api/events

    GET accepts an optional ``date`` (MM-DD-YYYY) or ``location`` filter;
    ``date`` wins when both are given.
    """

    def get(self, request: Request) -> Response:
        service = event_service()
        date = request.query_params.get("date")
        location = request.query_params.get("location")
        if date:
            events = service.search_events_by_date(date)
        elif location:
            events = service.search_events_by_location(location)
        else:
            events = service.list_events()
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        data = _validated(EventCreateSerializer, request)
        event = event_service().create_event(
            name=data["name"],
            description=data["description"],
            date=data["date"],
            start_time=data["start_time"],
            end_time=data["end_time"],
            location=data["location"],
            storage_center_id=str(data["storage_center_id"]),
        )
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET/DELETE /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = event_service().get_event(event_id)
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        event_service().remove_event(event_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class EventVolunteerListView(APIView):
    """Handler for POST /api/events/{event_id}/volunteers"""

    def post(self, request: Request, event_id: str) -> Response:
        data = _validated(EventVolunteerSerializer, request)
        event = event_service().add_volunteer_to_event(event_id, str(data["volunteer_id"]))
        return Response(EventSerializer(event).data)


class EventVolunteerDetailView(APIView):
    """Handler for DELETE /api/events/{event_id}/volunteers/{volunteer_id}"""

    def delete(self, request: Request, event_id: str, volunteer_id: str) -> Response:
        event = event_service().remove_volunteer_from_event(event_id, volunteer_id)
        return Response(EventSerializer(event).data)


class StorageCenterListView(APIView):
    """Handler for GET/POST /api/storage-centers"""

    def get(self, request: Request) -> Response:
        centers = storage_center_service().list_storage_centers()
        return Response(StorageCenterSerializer(centers, many=True).data)

    def post(self, request: Request) -> Response:
        data = _validated(StorageCenterCreateSerializer, request)
        center = storage_center_service().create_storage_center(
            name=data["name"],
            description=data["description"],
            organization_id=data.get("organization_id"),
        )
        return Response(StorageCenterSerializer(center).data, status=status.HTTP_201_CREATED)


class StorageCenterDetailView(APIView):
    """Handler for GET/PATCH /api/storage-centers/{storage_center_id}"""

    def get(self, request: Request, storage_center_id: str) -> Response:
        center = storage_center_service().get_storage_center(storage_center_id)
        return Response(StorageCenterSerializer(center).data)

    def patch(self, request: Request, storage_center_id: str) -> Response:
        data = _validated(StorageCenterUpdateSerializer, request, partial=True)
        center = storage_center_service().update_storage_center(
            storage_center_id,
            name=data.get("name"),
            description=data.get("description"),
        )
        return Response(StorageCenterSerializer(center).data)


class StorageCenterHoursView(APIView):
    """Handler for PUT /api/storage-centers/{storage_center_id}/hours/{day}"""

    def put(self, request: Request, storage_center_id: str, day: int) -> Response:
        data = _validated(DayHoursSerializer, request)
        center = storage_center_service().update_day_hours(
            storage_center_id,
            day=day,
            start_time=data["start_time"],
            end_time=data["end_time"],
        )
        return Response(StorageCenterSerializer(center).data)


class StorageCenterItemListView(APIView):
    """Handler for POST /api/storage-centers/{storage_center_id}/items"""

    def post(self, request: Request, storage_center_id: str) -> Response:
        data = _validated(ItemCreateSerializer, request)
        center = storage_center_service().add_item(
            storage_center_id,
            description=data["description"],
            quantity=data["quantity"],
            expiration_date=data.get("expiration_date"),
        )
        return Response(StorageCenterSerializer(center).data, status=status.HTTP_201_CREATED)


class ExpiredItemListView(APIView):
    """Handler for GET/DELETE /api/storage-centers/{storage_center_id}/expired-items"""

    def get(self, request: Request, storage_center_id: str) -> Response:
        items = storage_center_service().get_expired_items(storage_center_id)
        return Response(ItemSerializer(items, many=True).data)

    def delete(self, request: Request, storage_center_id: str) -> Response:
        recorded = storage_center_service().remove_expired_items(storage_center_id)
        return Response(TransactionSerializer(recorded, many=True).data)


class VolunteerListView(APIView):
    """Handler for GET/POST /api/volunteers"""

    def get(self, request: Request) -> Response:
        volunteers = volunteer_service().list_volunteers()
        return Response(VolunteerSerializer(volunteers, many=True).data)

    def post(self, request: Request) -> Response:
        data = _validated(VolunteerCreateSerializer, request)
        volunteer = volunteer_service().register_volunteer(
            name=data["name"],
            role=data["role"],
            join_date=data["join_date"],
        )
        return Response(VolunteerSerializer(volunteer).data, status=status.HTTP_201_CREATED)


class VolunteerDetailView(APIView):
    """Handler for GET/DELETE /api/volunteers/{volunteer_id}"""

    def get(self, request: Request, volunteer_id: str) -> Response:
        volunteer = volunteer_service().get_volunteer(volunteer_id)
        return Response(VolunteerSerializer(volunteer).data)

    def delete(self, request: Request, volunteer_id: str) -> Response:
        volunteer_service().remove_volunteer(volunteer_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
