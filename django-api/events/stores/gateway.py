"""Persistence gateway.

A single, explicitly constructed handle to the stores. The owner of the
gateway (the URL configuration) injects it where stores are needed.

connect() is idempotent: the first call opens the database connection and
builds the store handle, later and concurrent calls reuse it.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass

from django.db import DEFAULT_DB_ALIAS, OperationalError, connections

from events.domain.errors import DependencyUnavailableError
from events.stores.django_store import DjangoBookingStore, DjangoEventStore
from events.stores.interfaces import BookingStore, EventStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreHandle:
    """Ready-to-use stores."""

    events: EventStore
    bookings: BookingStore


class PersistenceGateway:
    """Lazily initialised, reusable store handle."""

    def __init__(
        self,
        alias: str = DEFAULT_DB_ALIAS,
        event_store_factory: Callable[[], EventStore] = DjangoEventStore,
        booking_store_factory: Callable[[], BookingStore] = DjangoBookingStore,
    ) -> None:
        self._alias = alias
        self._event_store_factory = event_store_factory
        self._booking_store_factory = booking_store_factory
        self._handle: StoreHandle | None = None
        self._lock = threading.Lock()

    @property
    def handle(self) -> StoreHandle | None:
        """The cached handle, or None before the first successful connect()."""
        return self._handle

    def connect(self) -> StoreHandle:
        """Return the store handle, opening the connection on first use.

        Raises:
            DependencyUnavailableError: If the database cannot be reached.
                The handle stays unset so a later call retries.
        """
        if self._handle is not None:
            return self._handle
        with self._lock:
            if self._handle is None:
                try:
                    connections[self._alias].ensure_connection()
                except OperationalError as exc:
                    logger.error("Persistence gateway cannot connect (alias=%s): %s", self._alias, exc)
                    raise DependencyUnavailableError("Event") from exc
                self._handle = StoreHandle(
                    events=self._event_store_factory(),
                    bookings=self._booking_store_factory(),
                )
                logger.info("Persistence gateway connected (alias=%s)", self._alias)
        return self._handle
