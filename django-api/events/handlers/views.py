"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.core.exceptions import ImproperlyConfigured
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain.errors import DomainError, ErrorCode, InvalidInputError
from events.handlers.serializers import (
    BookingInputSerializer,
    BookingSerializer,
    EventInputSerializer,
    EventSerializer,
)
from events.services.booking_service import BookingService
from events.services.event_service import EventService
from events.stores.gateway import PersistenceGateway, StoreHandle

ERROR_STATUS = {
    ErrorCode.FIELD_MISSING: status.HTTP_400_BAD_REQUEST,
    ErrorCode.COLLECTION_EMPTY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_REFERENCE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.SLUG_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.DANGLING_REFERENCE: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.DEPENDENCY_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_response(error: DomainError) -> Response:
    body = {"error": {"code": error.code.value, "message": error.message, "field": error.field}}
    return Response(body, status=ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST))


def invalid_input(exc: serializers.ValidationError) -> InvalidInputError:
    """Reduce a serializer error to its first field and message."""
    field, detail = None, exc.detail
    if isinstance(detail, dict):
        field, detail = next(iter(detail.items()))
    while isinstance(detail, (dict, list)):
        detail = next(iter(detail.values())) if isinstance(detail, dict) else detail[0]
    if field == "non_field_errors":
        field = None
    return InvalidInputError(field, str(detail))


class GatewayView(APIView):
    """Base view with an injected persistence gateway and domain error mapping."""

    gateway: PersistenceGateway | None = None

    def handle_exception(self, exc: Exception) -> Response:
        if isinstance(exc, serializers.ValidationError):
            exc = invalid_input(exc)
        if isinstance(exc, DomainError):
            return error_response(exc)
        return super().handle_exception(exc)

    def event_service(self) -> EventService:
        return EventService(self._stores().events)

    def booking_service(self) -> BookingService:
        stores = self._stores()
        return BookingService(stores.bookings, stores.events)

    def _stores(self) -> StoreHandle:
        if self.gateway is None:
            raise ImproperlyConfigured(f"{type(self).__name__} requires a gateway")
        return self.gateway.connect()


class EventListView(GatewayView):
    """Handler for GET and POST /api/events"""

    def get(self, request: Request) -> Response:
        events = self.event_service().list_events()
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = self.event_service().create_event(serializer.validated_data)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(GatewayView):
    """Handler for GET, PATCH and DELETE /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = self.event_service().get_event(event_id)
        return Response(EventSerializer(event).data)

    def patch(self, request: Request, event_id: str) -> Response:
        serializer = EventInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        event = self.event_service().update_event(event_id, serializer.validated_data)
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        self.event_service().delete_event(event_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class EventSlugView(GatewayView):
    """Handler for GET /api/events/slug/{slug}"""

    def get(self, request: Request, slug: str) -> Response:
        event = self.event_service().get_event_by_slug(slug)
        return Response(EventSerializer(event).data)


class EventBookingListView(GatewayView):
    """Handler for GET /api/events/{event_id}/bookings"""

    def get(self, request: Request, event_id: str) -> Response:
        bookings = self.booking_service().list_bookings_for_event(event_id)
        return Response(BookingSerializer(bookings, many=True).data)


class BookingCreateView(GatewayView):
    """Handler for POST /api/bookings"""

    def post(self, request: Request) -> Response:
        serializer = BookingInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = self.booking_service().create_booking(serializer.validated_data)
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)
