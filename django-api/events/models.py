"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
Nothing here normalizes or validates: write paths call the domain layer
explicitly before saving.
"""

import uuid

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    description = models.TextField()
    overview = models.TextField()
    image = models.TextField()
    venue = models.TextField()
    location = models.TextField()
    # Unparseable input is stored as given, so these stay strings.
    date = models.CharField(max_length=64)
    time = models.CharField(max_length=64)
    mode = models.CharField(max_length=64)
    audience = models.TextField()
    agenda = models.JSONField(default=list)
    organizer = models.TextField()
    tags = models.JSONField(default=list)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="event_created_at_idx"),
        ]
        constraints = [
            models.CheckConstraint(condition=~models.Q(slug=""), name="event_slug_not_empty"),
        ]

    def __str__(self) -> str:
        return self.title


class Booking(models.Model):
    """Persistence model for bookings.

    The event reference carries no database constraint and no cascade:
    existence is checked by the booking guard at write time only.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(
        Event,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="bookings",
    )
    email = models.CharField(max_length=254)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["event", "-created_at"], name="booking_event_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.email} - {self.event_id}"
