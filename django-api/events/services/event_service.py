"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from typing import Any

from events.domain import Event, EventId
from events.domain.errors import DomainError, EventNotFoundError, InvalidEventIdError
from events.domain.normalization import normalize_event
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(_parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError()
        return event

    def get_event_by_slug(self, slug: str) -> Event:
        """Return an event by slug.

        Raises:
            EventNotFoundError: If no event has this slug.
        """
        event = self._store.get_event_by_slug(slug)
        if event is None:
            raise EventNotFoundError()
        return event

    def create_event(self, payload: Mapping[str, Any]) -> Event:
        """Normalize, validate and insert a new event.

        Every field supplied in the payload counts as changed.

        Raises:
            FieldMissingError, CollectionEmptyError: If validation fails.
            SlugConflictError: If another event already has the derived slug.
        """
        try:
            record = normalize_event(payload, changed_fields=payload.keys())
            event = self._store.create_event(record)
        except DomainError as exc:
            logger.info("Rejected event create: %s", exc)
            raise
        logger.info("Created event %s (slug=%s)", event.id, event.slug)
        return event

    def update_event(self, event_id: str, changes: Mapping[str, Any]) -> Event:
        """Apply a partial update and re-run normalization on changed fields.

        A field counts as changed only when its new value differs from the
        stored one, so resending the current title keeps the slug.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            FieldMissingError, CollectionEmptyError: If validation fails.
            SlugConflictError: If a retitled event collides with another slug.
        """
        current = self.get_event(event_id)
        stored = current.to_record()
        changed = {name for name, value in changes.items() if stored.get(name) != value}

        try:
            record = normalize_event({**stored, **changes}, changed_fields=changed)
            event = self._store.update_event(current.id, record)
        except DomainError as exc:
            logger.info("Rejected update of event %s: %s", current.id, exc)
            raise
        if event is None:
            raise EventNotFoundError()
        logger.info("Updated event %s fields=%s", event.id, sorted(changed))
        return event

    def delete_event(self, event_id: str) -> None:
        """Delete an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = _parse_event_id(event_id)
        if not self._store.delete_event(parsed):
            raise EventNotFoundError()
        logger.info("Deleted event %s", parsed)


def _parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except ValueError:
        raise InvalidEventIdError() from None
