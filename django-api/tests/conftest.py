"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from rest_framework.test import APIClient

from events.domain import Event, EventId


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def event_payload() -> dict:
    return {
        "title": "PyCon Lisbon 2026",
        "description": "Three days of talks, tutorials and sprints.",
        "overview": "The community Python conference.",
        "image": "/images/pycon-lisbon.png",
        "venue": "Centro de Congressos",
        "location": "Lisbon, Portugal",
        "date": "November 10, 2026",
        "time": "9:00 AM",
        "mode": "offline",
        "audience": "Developers",
        "agenda": ["Registration", "Opening keynote", "Lightning talks"],
        "organizer": "PyCon PT",
        "tags": ["python", "conference"],
    }


@pytest.fixture
def make_event():
    """Build a domain Event from a normalized record."""

    def _make(**record) -> Event:
        now = datetime(2026, 1, 1, tzinfo=timezone.utc)
        defaults = {
            "title": "PyCon Lisbon 2026",
            "slug": "pycon-lisbon-2026",
            "description": "Talks",
            "overview": "Overview",
            "image": "/images/pycon.png",
            "venue": "Centro de Congressos",
            "location": "Lisbon",
            "date": "2026-11-10",
            "time": "09:00",
            "mode": "offline",
            "audience": "Developers",
            "agenda": ["Keynote"],
            "organizer": "PyCon PT",
            "tags": ["python"],
        }
        defaults.update(record)
        defaults["agenda"] = tuple(defaults["agenda"])
        defaults["tags"] = tuple(defaults["tags"])
        return Event(
            id=defaults.pop("id", EventId(uuid4())),
            created_at=now,
            updated_at=now,
            **defaults,
        )

    return _make
