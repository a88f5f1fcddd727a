"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from events.domain.value_objects import BookingId, EventId

EVENT_STRING_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "organizer",
)
EVENT_LIST_FIELDS = ("agenda", "tags")
EVENT_FIELDS = EVENT_STRING_FIELDS + EVENT_LIST_FIELDS + ("slug",)


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    slug: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: str
    audience: str
    agenda: tuple[str, ...]
    organizer: str
    tags: tuple[str, ...]
    created_at: datetime
    updated_at: datetime

    def to_record(self) -> dict[str, Any]:
        """Return the writable fields as a plain record."""
        record: dict[str, Any] = {name: getattr(self, name) for name in EVENT_FIELDS}
        for name in EVENT_LIST_FIELDS:
            record[name] = list(record[name])
        return record


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking."""

    id: BookingId
    event_id: EventId
    email: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class BookingDraft:
    """A booking that passed the integrity guard and may be written."""

    event_id: EventId
    email: str
