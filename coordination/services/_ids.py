"""Identifier parsing shared by the services."""

from typing import TypeVar

from coordination.domain.errors import InvalidIdError

IdT = TypeVar("IdT")


def parse_id(id_type: type[IdT], value: str) -> IdT:
    """Parse a raw identifier into ``id_type``.

    Raises:
        InvalidIdError: If the value is not a valid UUID.
    """
    try:
        return id_type.from_string(str(value))
    except ValueError as exc:
        raise InvalidIdError() from exc
