from events.handlers.views import (
    BookingCreateView,
    EventBookingListView,
    EventDetailView,
    EventListView,
    EventSlugView,
)

__all__ = [
    "BookingCreateView",
    "EventBookingListView",
    "EventDetailView",
    "EventListView",
    "EventSlugView",
]
