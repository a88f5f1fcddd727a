"""Event normalization and validation.

Every event write path calls normalize_event() explicitly before handing the
record to a store. The function:
- derives the slug when the title changed or no slug exists yet
- rewrites a changed date to YYYY-MM-DD and a changed time to HH:MM
- enforces required non-blank strings and non-empty agenda/tags

Parsing is best-effort: a date or time that cannot be parsed is kept as given.
Only emptiness is fatal.
"""

import re
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime, timezone
from typing import Any

from dateutil import parser as dateparser

from events.domain.errors import CollectionEmptyError, FieldMissingError
from events.domain.models import EVENT_FIELDS, EVENT_LIST_FIELDS, EVENT_STRING_FIELDS
from events.domain.text import clean_string, is_blank

_SLUG_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE_RUN = re.compile(r"\s+")
_HYPHEN_RUN = re.compile(r"-+")

_TIME_24H = re.compile(r"([0-9]{1,2}):([0-9]{2})")
_TIME_12H = re.compile(r"([0-9]{1,2})(?::([0-9]{2}))?\s*(am|pm)", re.IGNORECASE)

# dateutil fills missing parts from its default. Parsing against two defaults
# that differ in every component shows which parts the input actually named.
_DEFAULTS = (datetime(2000, 1, 1, 0, 0), datetime(2001, 2, 2, 1, 1))


def slugify(text: str) -> str:
    """Return the URL slug for a title.

    >>> slugify("Hello, World!!")
    'hello-world'
    """
    value = _SLUG_DISALLOWED.sub("", str(text).lower().strip())
    value = _WHITESPACE_RUN.sub("-", value)
    value = _HYPHEN_RUN.sub("-", value)
    return value.strip("-")


def normalize_date(value: str) -> str:
    """Rewrite a parseable date as YYYY-MM-DD, otherwise return it untouched."""
    parsed = _parse_named(value.strip(), _date_parts)
    if parsed is None:
        return value
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date().isoformat()


def normalize_time(value: str) -> str:
    """Rewrite a time as 24-hour HH:MM.

    Accepted, in order: "14:30" style 24-hour times, "9pm" / "9:15 AM" style
    12-hour times, then any dateutil-readable text that names an hour and minute.
    Unrecognised input is returned unchanged.
    """
    text = value.strip()

    match = _TIME_24H.fullmatch(text)
    if match:
        hour, minute = int(match[1]), int(match[2])
        if hour < 24 and minute < 60:
            return _format_time(hour, minute)

    match = _TIME_12H.fullmatch(text)
    if match:
        hour, minute = int(match[1]), int(match[2] or 0)
        if 1 <= hour <= 12 and minute < 60:
            is_pm = match[3].lower() == "pm"
            if hour == 12:
                hour = 12 if is_pm else 0
            elif is_pm:
                hour += 12
            return _format_time(hour, minute)

    parsed = _parse_named(text, _time_parts)
    if parsed is None:
        return value
    return _format_time(parsed.hour, parsed.minute)


def normalize_event(
    candidate: Mapping[str, Any], changed_fields: Iterable[str]
) -> dict[str, Any]:
    """Return a normalized copy of an event record ready to be written.

    Args:
        candidate: The full record as it would be stored after this write.
        changed_fields: Names of the fields this write sets or modifies.

    Raises:
        FieldMissingError: If a required string field is absent or blank.
        CollectionEmptyError: If agenda or tags is absent or empty.
    """
    changed = frozenset(changed_fields)
    record: dict[str, Any] = {name: clean_string(candidate.get(name)) for name in EVENT_FIELDS}
    for name in EVENT_LIST_FIELDS:
        record[name] = _clean_list(candidate.get(name))

    if "title" in changed or not record["slug"]:
        record["slug"] = slugify(record["title"] or "")

    if "date" in changed and isinstance(record["date"], str) and record["date"]:
        record["date"] = normalize_date(record["date"])

    if "time" in changed and isinstance(record["time"], str) and record["time"]:
        record["time"] = normalize_time(record["time"])

    _check_required(record)
    return record


def _format_time(hour: int, minute: int) -> str:
    return f"{hour:02d}:{minute:02d}"


def _date_parts(parsed: datetime) -> tuple[int, int, int]:
    return parsed.year, parsed.month, parsed.day


def _time_parts(parsed: datetime) -> tuple[int, int]:
    return parsed.hour, parsed.minute


def _parse_named(text: str, parts: Callable[[datetime], tuple]) -> datetime | None:
    """Parse text, or return None when it leaves any of parts to the default."""
    try:
        first, second = (dateparser.parse(text, default=default) for default in _DEFAULTS)
    except (ValueError, OverflowError):
        return None
    if parts(first) != parts(second):
        return None
    return first


def _clean_list(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return [clean_string(item) for item in value]
    return value


def _check_required(record: Mapping[str, Any]) -> None:
    for name in EVENT_STRING_FIELDS:
        if is_blank(record[name]):
            raise FieldMissingError(name)

    for name in EVENT_LIST_FIELDS:
        items = record[name]
        if not isinstance(items, list) or not items:
            raise CollectionEmptyError(name)
        if not all(isinstance(item, str) for item in items):
            raise CollectionEmptyError(name)
