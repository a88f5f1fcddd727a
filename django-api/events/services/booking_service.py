"""Booking service.

Every booking write goes through guard_booking() before it reaches the store,
so a booking is never written for an event that does not exist at check time.
"""

import logging
from collections.abc import Mapping
from typing import Any

from events.domain import Booking, EventId
from events.domain.errors import (
    DependencyUnavailableError,
    DomainError,
    EventNotFoundError,
    InvalidEventIdError,
)
from events.services.booking_guard import guard_booking
from events.stores.interfaces import BookingStore, EventStore

logger = logging.getLogger(__name__)


class BookingService:
    """Service for booking operations."""

    def __init__(self, store: BookingStore, events: EventStore | None) -> None:
        self._store = store
        self._events = events

    def create_booking(self, payload: Mapping[str, Any]) -> Booking:
        """Validate and insert a booking.

        Raises:
            MissingReferenceError: If event_id is absent.
            FieldMissingError: If email is absent.
            InvalidEmailError: If email is malformed.
            DependencyUnavailableError: If the event store is not available.
            DanglingReferenceError: If the referenced event does not exist.
        """
        try:
            draft = guard_booking(payload, self._events)
        except DomainError as exc:
            logger.info("Rejected booking: %s", exc)
            raise
        booking = self._store.create_booking(draft)
        logger.info("Created booking %s for event %s", booking.id, booking.event_id)
        return booking

    def list_bookings_for_event(self, event_id: str) -> list[Booking]:
        """Return the bookings of an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            DependencyUnavailableError: If the event store is not available.
            EventNotFoundError: If the event does not exist.
        """
        try:
            parsed = EventId.from_string(event_id)
        except ValueError:
            raise InvalidEventIdError() from None
        if self._events is None:
            raise DependencyUnavailableError("Event")
        if not self._events.event_exists(parsed):
            raise EventNotFoundError()
        return self._store.list_bookings_for_event(parsed)
