"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    FIELD_MISSING = "FIELD_MISSING"
    COLLECTION_EMPTY = "COLLECTION_EMPTY"
    INVALID_EMAIL = "INVALID_EMAIL"
    MISSING_REFERENCE = "MISSING_REFERENCE"
    DANGLING_REFERENCE = "DANGLING_REFERENCE"
    DEPENDENCY_UNAVAILABLE = "DEPENDENCY_UNAVAILABLE"
    SLUG_CONFLICT = "SLUG_CONFLICT"
    INVALID_INPUT = "INVALID_INPUT"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code, user-safe message and offending field."""

    code: ErrorCode
    message: str
    field: str | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class FieldMissingError(DomainError):
    """Raised when a required string field is absent or blank."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.FIELD_MISSING,
            message=f"{field} is required and cannot be empty",
            field=field,
        )


class CollectionEmptyError(DomainError):
    """Raised when agenda or tags is absent or has no items."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.COLLECTION_EMPTY,
            message=f"{field} must be a non-empty array of strings",
            field=field,
        )


class InvalidEmailError(DomainError):
    """Raised when a booking email does not match the address grammar."""

    def __init__(self, value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EMAIL,
            message=f"{value} is not a valid email",
            field="email",
        )


class MissingReferenceError(DomainError):
    """Raised when a booking has no event_id."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_REFERENCE,
            message="event_id is required",
            field="event_id",
        )


class DanglingReferenceError(DomainError):
    """Raised when a booking references an event that does not exist."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.DANGLING_REFERENCE,
            message="Referenced eventId does not exist",
            field="event_id",
        )


class DependencyUnavailableError(DomainError):
    """Raised when a store needed for a check has not been initialised."""

    def __init__(self, dependency: str) -> None:
        super().__init__(
            code=ErrorCode.DEPENDENCY_UNAVAILABLE,
            message=f"{dependency} store is not available",
        )


class SlugConflictError(DomainError):
    """Raised when the persistence layer rejects a derived slug."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            code=ErrorCode.SLUG_CONFLICT,
            message=f"An event with slug '{slug}' already exists",
            field="slug",
        )


class InvalidInputError(DomainError):
    """Raised when a request payload has the wrong shape or type."""

    def __init__(self, field: str | None, message: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_INPUT,
            message=message,
            field=field,
        )
