"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
Stores persist what they are given: normalization and validation happen in
the domain layer before a write reaches them.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from events.domain import Booking, BookingDraft, Event, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by created_at descending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_event_by_slug(self, slug: str) -> Event | None:
        """Return an event by slug, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def create_event(self, record: Mapping[str, Any]) -> Event:
        """Insert a normalized event record.

        Raises:
            SlugConflictError: If the slug is already taken or empty.
        """
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, record: Mapping[str, Any]) -> Event | None:
        """Overwrite an event with a normalized record, or return None if missing.

        Raises:
            SlugConflictError: If the slug is already taken or empty.
        """
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Delete an event. Bookings that reference it are left in place."""
        ...


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def create_booking(self, draft: BookingDraft) -> Booking:
        """Insert a booking that passed the integrity guard."""
        ...

    @abstractmethod
    def list_bookings_for_event(self, event_id: EventId) -> list[Booking]:
        """Return bookings of one event ordered by created_at descending."""
        ...
