from django import forms
from django.contrib import admin

from events.domain.errors import DomainError, SlugConflictError
from events.domain.normalization import normalize_event
from events.models import Booking, Event
from events.services.booking_guard import guard_booking
from events.stores.django_store import DjangoEventStore


def _as_validation_error(form: forms.ModelForm, error: DomainError) -> forms.ValidationError:
    field = "title" if error.field == "slug" else error.field
    if field in form.fields:
        return forms.ValidationError({field: error.message})
    return forms.ValidationError(error.message)


class EventAdminForm(forms.ModelForm):
    """Runs event normalization on admin saves."""

    class Meta:
        model = Event
        exclude = ["slug"]

    def clean(self):
        cleaned = super().clean()
        record = {name: cleaned.get(name, getattr(self.instance, name)) for name in self.fields}
        record["slug"] = self.instance.slug
        changed = list(self.fields) if self.instance._state.adding else self.changed_data
        try:
            normalized = normalize_event(record, changed_fields=changed)
        except DomainError as exc:
            raise _as_validation_error(self, exc) from None
        slug = normalized.pop("slug")
        if not slug or Event.objects.exclude(pk=self.instance.pk).filter(slug=slug).exists():
            raise _as_validation_error(self, SlugConflictError(slug))
        self.instance.slug = slug
        cleaned.update({name: value for name, value in normalized.items() if name in self.fields})
        return cleaned


class BookingAdminForm(forms.ModelForm):
    """Runs the booking integrity guard on admin saves."""

    class Meta:
        model = Booking
        fields = ["event", "email"]

    def clean(self):
        cleaned = super().clean()
        event = cleaned.get("event")
        candidate = {"event_id": event.pk if event else None, "email": cleaned.get("email")}
        try:
            draft = guard_booking(candidate, DjangoEventStore())
        except DomainError as exc:
            raise _as_validation_error(self, exc) from None
        cleaned["email"] = draft.email
        return cleaned


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    form = EventAdminForm
    list_display = ["title", "slug", "date", "time", "location", "created_at"]
    search_fields = ["title", "slug", "location"]
    readonly_fields = ["slug", "created_at", "updated_at"]


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    form = BookingAdminForm
    list_display = ["email", "event", "created_at"]
    list_filter = ["event"]
