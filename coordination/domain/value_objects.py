"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import datetime, time
from typing import Self
from uuid import UUID

from coordination.domain.errors import ValidationError

TIME_FORMAT = "%H:%M"


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))


@dataclass(frozen=True)
class StorageCenterId:
    """Unique identifier for a StorageCenter."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))


@dataclass(frozen=True)
class VolunteerId:
    """Unique identifier for a Volunteer."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))


@dataclass(frozen=True)
class ItemId:
    """Unique identifier for an Item."""

    value: UUID


@dataclass(frozen=True)
class TransactionId:
    """Unique identifier for a Transaction."""

    value: UUID


@dataclass(frozen=True)
class Quantity:
    """Non-negative integer representing a count of donated goods."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError("Quantity must be a whole number")
        if self.value < 0:
            raise ValidationError("Quantity cannot be negative")

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class TimeSlot:
    """Time-of-day interval.

    Invariant: start is strictly before end. Containment treats the end as
    exclusive so that back-to-back slots never both contain the boundary.
    """

    start: time
    end: time

    def __post_init__(self) -> None:
        if not isinstance(self.start, time) or not isinstance(self.end, time):
            raise ValidationError("Start and end must be times of day")
        if self.start >= self.end:
            raise ValidationError(
                f"Start time {self.start:%H:%M} must be before end time {self.end:%H:%M}"
            )

    @classmethod
    def from_strings(cls, start: str, end: str) -> Self:
        """Parse two ``HH:MM`` strings into a slot."""
        try:
            parsed_start = datetime.strptime(start, TIME_FORMAT).time()
            parsed_end = datetime.strptime(end, TIME_FORMAT).time()
        except (TypeError, ValueError) as exc:
            raise ValidationError("Times must use the HH:MM format") from exc
        return cls(start=parsed_start, end=parsed_end)

    def contains(self, moment: time) -> bool:
        return self.start <= moment < self.end

    def overlaps(self, other: "TimeSlot") -> bool:
        return self.start < other.end and other.start < self.end

    def __str__(self) -> str:
        return f"{self.start:%H:%M} - {self.end:%H:%M}"
