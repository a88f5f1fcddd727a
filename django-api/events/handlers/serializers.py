"""Serializers for request parsing and for domain models in API responses.

Input serializers only check format. Required fields, emptiness and
references are domain rules, so every input field is optional here.
"""

from rest_framework import serializers


def _optional_text(**kwargs) -> serializers.CharField:
    return serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False, **kwargs
    )


def _optional_list() -> serializers.ListField:
    return serializers.ListField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=False),
        required=False,
        allow_null=True,
    )


class EventInputSerializer(serializers.Serializer):
    """Parses an event create or partial update payload."""

    title = _optional_text(max_length=255)
    description = _optional_text()
    overview = _optional_text()
    image = _optional_text()
    venue = _optional_text()
    location = _optional_text()
    date = _optional_text(max_length=64)
    time = _optional_text(max_length=64)
    mode = _optional_text(max_length=64)
    audience = _optional_text()
    agenda = _optional_list()
    organizer = _optional_text()
    tags = _optional_list()


class BookingInputSerializer(serializers.Serializer):
    """Parses a booking create payload."""

    eventId = serializers.CharField(
        source="event_id", required=False, allow_blank=True, allow_null=True
    )
    email = _optional_text(max_length=254)


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    title = serializers.CharField()
    slug = serializers.CharField()
    description = serializers.CharField()
    overview = serializers.CharField()
    image = serializers.CharField()
    venue = serializers.CharField()
    location = serializers.CharField()
    date = serializers.CharField()
    time = serializers.CharField()
    mode = serializers.CharField()
    audience = serializers.CharField()
    agenda = serializers.ListField(child=serializers.CharField())
    organizer = serializers.CharField()
    tags = serializers.ListField(child=serializers.CharField())
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.UUIDField(source="id.value")
    eventId = serializers.UUIDField(source="event_id.value")
    email = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")
