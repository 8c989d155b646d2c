"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone


class StorageCenter(models.Model):
    """Persistence model for storage centers."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField()
    organization_id = models.UUIDField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class OperatingHours(models.Model):
    """Opening hours of a storage center for one ISO day of week."""

    storage_center = models.ForeignKey(
        StorageCenter, on_delete=models.CASCADE, related_name="operating_hours"
    )
    day_of_week = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(7)]
    )
    start_time = models.TimeField()
    end_time = models.TimeField()

    class Meta:
        ordering = ["day_of_week"]
        constraints = [
            models.UniqueConstraint(
                fields=["storage_center", "day_of_week"],
                name="unique_hours_per_day",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.storage_center.name} - day {self.day_of_week}"


class Item(models.Model):
    """Persistence model for donated items."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    storage_center = models.ForeignKey(
        StorageCenter, on_delete=models.CASCADE, related_name="items"
    )
    description = models.CharField(max_length=255)
    quantity = models.PositiveIntegerField()
    expiration_date = models.DateField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(
                fields=["storage_center", "expiration_date"],
                name="item_center_expiry_idx",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.description} x{self.quantity}"


class Transaction(models.Model):
    """Append-only audit record of an inventory change."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    storage_center = models.ForeignKey(
        StorageCenter, on_delete=models.CASCADE, related_name="transactions"
    )
    item = models.ForeignKey(
        Item,
        on_delete=models.SET_NULL,
        blank=True,
        null=True,
        related_name="transactions",
    )
    item_description = models.CharField(max_length=255)
    quantity = models.IntegerField()
    reason = models.CharField(max_length=255)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["created_at"]

    def __str__(self) -> str:
        return f"{self.reason}: {self.item_description} ({self.quantity})"


class Volunteer(models.Model):
    """Persistence model for volunteers."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    role = models.CharField(max_length=255, blank=True)
    join_date = models.CharField(max_length=32, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField()
    date = models.CharField(max_length=10)
    start_time = models.TimeField()
    end_time = models.TimeField()
    location = models.CharField(max_length=255)
    storage_center = models.ForeignKey(
        StorageCenter, on_delete=models.PROTECT, related_name="events"
    )
    volunteers = models.ManyToManyField(Volunteer, blank=True, related_name="events")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="event_created_idx"),
            models.Index(fields=["date"], name="event_date_idx"),
            models.Index(fields=["location"], name="event_location_idx"),
        ]

    def __str__(self) -> str:
        return self.name
