"""Domain error codes for the coordination module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_STATE = "INVALID_STATE"
    INVALID_ID = "INVALID_ID"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    STORAGE_CENTER_NOT_FOUND = "STORAGE_CENTER_NOT_FOUND"
    VOLUNTEER_NOT_FOUND = "VOLUNTEER_NOT_FOUND"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when a field, day or time range is rejected before mutation."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_ERROR, message=message)


class StateError(DomainError):
    """Raised when an entity lacks, or repeats, a one-time initialization."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_STATE, message=message)


class InvalidIdError(DomainError):
    """Raised when an identifier is not a valid UUID."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ID,
            message="Invalid ID format",
        )


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )


class StorageCenterNotFoundError(DomainError):
    """Raised when a storage center is not found."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.STORAGE_CENTER_NOT_FOUND,
            message="Storage center not found",
        )


class VolunteerNotFoundError(DomainError):
    """Raised when a volunteer is not found."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.VOLUNTEER_NOT_FOUND,
            message="Volunteer not found",
        )
