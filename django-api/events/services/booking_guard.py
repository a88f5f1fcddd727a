"""Booking integrity guard.

Runs synchronously on every booking write, before the write commits:
- event_id must be given
- email must match the address grammar; it is stored trimmed and lowercase
- the referenced event must exist at the time of the check

The existence check is a point-in-time read. Nothing stops the event from
being deleted between the check and the booking write.
"""

from collections.abc import Mapping
from typing import Any

from events.domain import BookingDraft, EventId
from events.domain.errors import (
    DanglingReferenceError,
    DependencyUnavailableError,
    FieldMissingError,
    InvalidEmailError,
    MissingReferenceError,
)
from events.domain.text import is_blank, is_valid_email, normalize_email
from events.stores.interfaces import EventStore


def guard_booking(candidate: Mapping[str, Any], events: EventStore | None) -> BookingDraft:
    """Validate a booking candidate and return the draft to write.

    Raises:
        MissingReferenceError: If event_id is absent.
        FieldMissingError: If email is absent or blank.
        InvalidEmailError: If email does not match the address grammar.
        DependencyUnavailableError: If the event store is not initialised.
        DanglingReferenceError: If no event has the given id.
    """
    raw_event_id = candidate.get("event_id")
    if is_blank(raw_event_id):
        raise MissingReferenceError()

    raw_email = candidate.get("email")
    if is_blank(raw_email):
        raise FieldMissingError("email")
    email = normalize_email(str(raw_email))
    if not is_valid_email(email):
        raise InvalidEmailError(email)

    if events is None:
        raise DependencyUnavailableError("Event")

    try:
        event_id = EventId.coerce(raw_event_id)
    except ValueError:
        raise DanglingReferenceError() from None

    if not events.event_exists(event_id):
        raise DanglingReferenceError()

    return BookingDraft(event_id=event_id, email=email)
