"""Django ORM implementations of the event and booking stores."""

from collections.abc import Mapping
from typing import Any

from django.db import IntegrityError, transaction

from events import models
from events.domain import Booking, BookingDraft, BookingId, Event, EventId
from events.domain.errors import SlugConflictError
from events.domain.models import EVENT_FIELDS
from events.stores.interfaces import BookingStore, EventStore


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_events(self) -> list[Event]:
        return [_to_event(row) for row in models.Event.objects.all()]

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return _to_event(row) if row else None

    def get_event_by_slug(self, slug: str) -> Event | None:
        row = models.Event.objects.filter(slug=slug).first()
        return _to_event(row) if row else None

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(pk=event_id.value).exists()

    def create_event(self, record: Mapping[str, Any]) -> Event:
        row = models.Event(**_writable(record))
        _save_event(row)
        return _to_event(row)

    def update_event(self, event_id: EventId, record: Mapping[str, Any]) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        if row is None:
            return None
        for name, value in _writable(record).items():
            setattr(row, name, value)
        _save_event(row)
        return _to_event(row)

    def delete_event(self, event_id: EventId) -> bool:
        deleted, _ = models.Event.objects.filter(pk=event_id.value).delete()
        return deleted > 0


class DjangoBookingStore(BookingStore):
    """Relational booking store using Django ORM."""

    def create_booking(self, draft: BookingDraft) -> Booking:
        row = models.Booking.objects.create(event_id=draft.event_id.value, email=draft.email)
        return _to_booking(row)

    def list_bookings_for_event(self, event_id: EventId) -> list[Booking]:
        rows = models.Booking.objects.filter(event_id=event_id.value)
        return [_to_booking(row) for row in rows]


def _writable(record: Mapping[str, Any]) -> dict[str, Any]:
    return {name: record[name] for name in EVENT_FIELDS if name in record}


def _save_event(row: models.Event) -> None:
    try:
        with transaction.atomic():
            row.save()
    except IntegrityError:
        raise SlugConflictError(row.slug) from None


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        title=row.title,
        slug=row.slug,
        description=row.description,
        overview=row.overview,
        image=row.image,
        venue=row.venue,
        location=row.location,
        date=row.date,
        time=row.time,
        mode=row.mode,
        audience=row.audience,
        agenda=tuple(row.agenda),
        organizer=row.organizer,
        tags=tuple(row.tags),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_booking(row: models.Booking) -> Booking:
    return Booking(
        id=BookingId(row.id),
        event_id=EventId(row.event_id),
        email=row.email,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )
