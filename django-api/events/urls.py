from django.urls import path

from events.handlers import (
    BookingCreateView,
    EventBookingListView,
    EventDetailView,
    EventListView,
    EventSlugView,
)
from events.stores.gateway import PersistenceGateway


def build_urlpatterns(gateway: PersistenceGateway) -> list:
    """Return the API routes with the gateway injected into every view."""
    return [
        path("events", EventListView.as_view(gateway=gateway), name="event-list"),
        path("events/slug/<slug:slug>", EventSlugView.as_view(gateway=gateway), name="event-by-slug"),
        path("events/<str:event_id>", EventDetailView.as_view(gateway=gateway), name="event-detail"),
        path(
            "events/<str:event_id>/bookings",
            EventBookingListView.as_view(gateway=gateway),
            name="event-bookings",
        ),
        path("bookings", BookingCreateView.as_view(gateway=gateway), name="booking-create"),
    ]
