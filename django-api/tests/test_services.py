"""Unit tests for EventService, BookingService and the booking guard.

These test error handling and domain error mapping against store doubles.
Run with: pytest tests/test_services.py -v
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from events.domain import Booking, BookingDraft, BookingId, EventId
from events.domain.errors import (
    CollectionEmptyError,
    DanglingReferenceError,
    DependencyUnavailableError,
    EventNotFoundError,
    FieldMissingError,
    InvalidEmailError,
    InvalidEventIdError,
    MissingReferenceError,
    SlugConflictError,
)
from events.services.booking_guard import guard_booking
from events.services.booking_service import BookingService
from events.services.event_service import EventService
from events.stores.interfaces import BookingStore, EventStore

EVENT_UUID = "7b0c5d9e-4c1f-4e55-9d0f-3b1f8f2a6c11"


@pytest.fixture
def event_store(make_event) -> MagicMock:
    store = MagicMock(spec=EventStore)
    store.create_event.side_effect = lambda record: make_event(**record)
    store.update_event.side_effect = lambda event_id, record: make_event(id=event_id, **record)
    store.event_exists.return_value = True
    return store


@pytest.fixture
def booking_store() -> MagicMock:
    store = MagicMock(spec=BookingStore)

    def _create(draft: BookingDraft) -> Booking:
        now = datetime.now(timezone.utc)
        return Booking(
            id=BookingId(uuid4()),
            event_id=draft.event_id,
            email=draft.email,
            created_at=now,
            updated_at=now,
        )

    store.create_booking.side_effect = _create
    return store


class TestEventService:
    """Tests for EventService."""

    def test_get_event_invalid_id_raises_error(self, event_store):
        """get_event raises InvalidEventIdError for malformed UUID."""
        with pytest.raises(InvalidEventIdError):
            EventService(event_store).get_event("not-a-uuid")
        event_store.get_event.assert_not_called()

    def test_get_event_not_found_raises_error(self, event_store):
        """get_event raises EventNotFoundError when store returns None."""
        event_store.get_event.return_value = None
        with pytest.raises(EventNotFoundError):
            EventService(event_store).get_event(EVENT_UUID)

    def test_get_event_by_slug_not_found_raises_error(self, event_store):
        """get_event_by_slug raises EventNotFoundError when store returns None."""
        event_store.get_event_by_slug.return_value = None
        with pytest.raises(EventNotFoundError):
            EventService(event_store).get_event_by_slug("missing")

    def test_create_event_writes_normalized_record(self, event_store, event_payload):
        """create_event hands the normalized record to the store."""
        event = EventService(event_store).create_event(event_payload)

        record = event_store.create_event.call_args.args[0]
        assert record["slug"] == "pycon-lisbon-2026"
        assert record["time"] == "09:00"
        assert event.date == "2026-11-10"

    def test_create_event_with_empty_agenda_never_reaches_store(self, event_store, event_payload):
        """A validation failure aborts before the store is called."""
        event_payload["agenda"] = []
        with pytest.raises(CollectionEmptyError):
            EventService(event_store).create_event(event_payload)
        event_store.create_event.assert_not_called()

    def test_create_event_propagates_slug_conflict(self, event_store, event_payload):
        """SlugConflictError from the store reaches the caller."""
        event_store.create_event.side_effect = SlugConflictError("pycon-lisbon-2026")
        with pytest.raises(SlugConflictError):
            EventService(event_store).create_event(event_payload)

    def test_update_date_keeps_existing_slug(self, event_store, make_event):
        """Updating the date without touching the title keeps the slug."""
        existing = make_event(title="Hello, World!!", slug="custom-slug")
        event_store.get_event.return_value = existing

        updated = EventService(event_store).update_event(
            str(existing.id), {"date": "December 1, 2026"}
        )

        assert updated.slug == "custom-slug"
        assert updated.date == "2026-12-01"

    def test_update_with_same_title_keeps_slug(self, event_store, make_event):
        """Resending the stored title does not count as a title change."""
        existing = make_event(title="Hello, World!!", slug="custom-slug")
        event_store.get_event.return_value = existing

        updated = EventService(event_store).update_event(
            str(existing.id), {"title": "Hello, World!!"}
        )

        assert updated.slug == "custom-slug"

    def test_update_title_rederives_slug(self, event_store, make_event):
        """Changing the title recomputes the slug."""
        existing = make_event(title="Hello, World!!", slug="custom-slug")
        event_store.get_event.return_value = existing

        updated = EventService(event_store).update_event(str(existing.id), {"title": "Goodbye"})

        assert updated.slug == "goodbye"

    def test_update_does_not_reparse_untouched_time(self, event_store, make_event):
        """Only the changed fields are re-normalized."""
        existing = make_event(time="after lunch", slug="pycon")
        event_store.get_event.return_value = existing

        updated = EventService(event_store).update_event(str(existing.id), {"venue": "Hall B"})

        assert updated.time == "after lunch"
        assert updated.venue == "Hall B"

    def test_update_blanking_required_field_fails(self, event_store, make_event):
        """A partial update cannot blank a required field."""
        existing = make_event()
        event_store.get_event.return_value = existing

        with pytest.raises(FieldMissingError):
            EventService(event_store).update_event(str(existing.id), {"organizer": ""})
        event_store.update_event.assert_not_called()

    def test_delete_missing_event_raises_error(self, event_store):
        """delete_event raises EventNotFoundError when nothing was deleted."""
        event_store.delete_event.return_value = False
        with pytest.raises(EventNotFoundError):
            EventService(event_store).delete_event(EVENT_UUID)


class TestBookingGuard:
    """Tests for guard_booking."""

    def test_missing_event_id(self, event_store):
        with pytest.raises(MissingReferenceError) as exc_info:
            guard_booking({"email": "user@example.com"}, event_store)
        assert exc_info.value.message == "event_id is required"

    def test_missing_email(self, event_store):
        with pytest.raises(FieldMissingError) as exc_info:
            guard_booking({"event_id": EVENT_UUID, "email": "  "}, event_store)
        assert exc_info.value.field == "email"

    def test_invalid_email_names_the_value(self, event_store):
        with pytest.raises(InvalidEmailError) as exc_info:
            guard_booking({"event_id": EVENT_UUID, "email": "nobody@nowhere"}, event_store)
        assert "nobody@nowhere" in exc_info.value.message
        event_store.event_exists.assert_not_called()

    def test_uninitialised_event_store(self):
        with pytest.raises(DependencyUnavailableError):
            guard_booking({"event_id": EVENT_UUID, "email": "user@example.com"}, None)

    def test_unknown_event(self, event_store):
        event_store.event_exists.return_value = False
        with pytest.raises(DanglingReferenceError) as exc_info:
            guard_booking({"event_id": EVENT_UUID, "email": "user@example.com"}, event_store)
        assert exc_info.value.message == "Referenced eventId does not exist"

    def test_malformed_event_id_is_a_dangling_reference(self, event_store):
        with pytest.raises(DanglingReferenceError):
            guard_booking({"event_id": "42", "email": "user@example.com"}, event_store)
        event_store.event_exists.assert_not_called()

    def test_email_is_normalized(self, event_store):
        draft = guard_booking(
            {"event_id": EVENT_UUID, "email": " USER@Example.COM "}, event_store
        )
        assert draft == BookingDraft(event_id=EventId.from_string(EVENT_UUID), email="user@example.com")
        event_store.event_exists.assert_called_once_with(EventId.from_string(EVENT_UUID))


class TestBookingService:
    """Tests for BookingService."""

    def test_create_booking_writes_guarded_draft(self, booking_store, event_store):
        booking = BookingService(booking_store, event_store).create_booking(
            {"event_id": EVENT_UUID, "email": " USER@Example.COM "}
        )
        assert booking.email == "user@example.com"
        assert str(booking.event_id) == EVENT_UUID

    def test_dangling_reference_performs_no_write(self, booking_store, event_store):
        event_store.event_exists.return_value = False
        with pytest.raises(DanglingReferenceError):
            BookingService(booking_store, event_store).create_booking(
                {"event_id": EVENT_UUID, "email": "user@example.com"}
            )
        booking_store.create_booking.assert_not_called()

    def test_list_bookings_for_unknown_event(self, booking_store, event_store):
        event_store.event_exists.return_value = False
        with pytest.raises(EventNotFoundError):
            BookingService(booking_store, event_store).list_bookings_for_event(EVENT_UUID)

    def test_list_bookings_invalid_id(self, booking_store, event_store):
        with pytest.raises(InvalidEventIdError):
            BookingService(booking_store, event_store).list_bookings_for_event("nope")

    def test_list_bookings_without_event_store(self, booking_store):
        with pytest.raises(DependencyUnavailableError):
            BookingService(booking_store, None).list_bookings_for_event(EVENT_UUID)
