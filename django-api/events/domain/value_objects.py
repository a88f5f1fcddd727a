"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def coerce(cls, value: "EventId | UUID | str") -> Self:
        """Build an EventId from any accepted representation.

        Raises:
            ValueError: If a string value is not a valid UUID.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, UUID):
            return cls(value=value)
        return cls.from_string(str(value).strip())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a Booking."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)
