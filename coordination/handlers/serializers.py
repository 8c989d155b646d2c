"""Serializers for transforming domain models to API responses and parsing input.

Output serializers read domain objects; input serializers only check request
shape and leave business rules to the domain.
"""

from rest_framework import serializers

from coordination.domain.models import day_name

TIME_FORMAT = "%H:%M"


class TimeSlotSerializer(serializers.Serializer):
    """Serializer for TimeSlot value objects."""

    start = serializers.TimeField(format=TIME_FORMAT)
    end = serializers.TimeField(format=TIME_FORMAT)


class ItemSerializer(serializers.Serializer):
    """Serializer for Item domain model."""

    id = serializers.UUIDField(source="id.value")
    description = serializers.CharField()
    quantity = serializers.IntegerField(source="quantity.value")
    expiration_date = serializers.DateField(allow_null=True)


class TransactionSerializer(serializers.Serializer):
    """Serializer for Transaction domain model."""

    id = serializers.UUIDField(source="id.value", allow_null=True)
    item_id = serializers.UUIDField(source="item_id.value", allow_null=True)
    item_description = serializers.CharField()
    quantity = serializers.IntegerField()
    reason = serializers.CharField()
    created_at = serializers.DateTimeField()


class StorageCenterSummarySerializer(serializers.Serializer):
    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()


class StorageCenterSerializer(StorageCenterSummarySerializer):
    """Serializer for StorageCenter domain model."""

    description = serializers.CharField()
    organization_id = serializers.UUIDField(allow_null=True)
    operating_hours = serializers.SerializerMethodField()
    items = ItemSerializer(many=True)
    summary = serializers.CharField(source="__str__")

    def get_operating_hours(self, obj) -> dict:
        return {
            day_name(day): TimeSlotSerializer(slot).data
            for day, slot in obj.operating_hours.items()
        }


class VolunteerSerializer(serializers.Serializer):
    """Serializer for Volunteer domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    role = serializers.CharField()
    join_date = serializers.CharField()
    event_ids = serializers.SerializerMethodField()

    def get_event_ids(self, obj) -> list[str]:
        return sorted(str(event_id.value) for event_id in obj.event_ids)


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    date = serializers.CharField()
    time = TimeSlotSerializer(source="time_slot")
    location = serializers.CharField()
    storage_center = StorageCenterSummarySerializer()
    volunteers = serializers.SerializerMethodField()
    volunteer_count = serializers.IntegerField()
    summary = serializers.CharField(source="__str__")

    def get_volunteers(self, obj) -> list[dict]:
        return VolunteerSerializer(list(obj.roster.values()), many=True).data


class EventCreateSerializer(serializers.Serializer):
    name = serializers.CharField()
    description = serializers.CharField()
    date = serializers.CharField()
    start_time = serializers.CharField()
    end_time = serializers.CharField()
    location = serializers.CharField()
    storage_center_id = serializers.UUIDField()


class EventVolunteerSerializer(serializers.Serializer):
    volunteer_id = serializers.UUIDField()


class StorageCenterCreateSerializer(serializers.Serializer):
    name = serializers.CharField()
    description = serializers.CharField()
    organization_id = serializers.UUIDField(required=False, allow_null=True)


class StorageCenterUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(required=False)
    description = serializers.CharField(required=False)


class DayHoursSerializer(serializers.Serializer):
    start_time = serializers.CharField()
    end_time = serializers.CharField()


class ItemCreateSerializer(serializers.Serializer):
    description = serializers.CharField()
    quantity = serializers.IntegerField()
    expiration_date = serializers.DateField(required=False, allow_null=True)


class VolunteerCreateSerializer(serializers.Serializer):
    name = serializers.CharField()
    role = serializers.CharField(allow_blank=True)
    join_date = serializers.CharField(allow_blank=True)
