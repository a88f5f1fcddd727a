from events.domain.models import Booking, BookingDraft, Event
from events.domain.value_objects import BookingId, EventId

__all__ = [
    "Event",
    "Booking",
    "BookingDraft",
    "EventId",
    "BookingId",
]
