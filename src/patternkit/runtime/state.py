from __future__ import annotations

import logging
import threading
import time
from collections import deque
from typing import Any

from ..core.accessor import AccessEvent, GuardedAccessor, RecordView
from ..core.errors import NotificationError
from ..core.hub import NotificationHub
from ..core.registry import IdentityRegistry
from ..patterns.books import BookCatalog, BookCopy
from ..patterns.counter import Counter, create_counter
from ..patterns.person import default_person, validating_accessor
from .settings import (
    LogLevel,
    PlaygroundSettings,
    PlaygroundSettingsStore,
    normalize_event_log_limit,
    settings_from_env,
)


logger = logging.getLogger(__name__)

_MUTATING_KINDS = frozenset({"write", "book.added", "counter.changed"})


class AppState:
    """Composition root for the playground.

    Owns one catalog, one guarded person record and one counter, and records
    everything they report on a bounded event log.
    """

    def __init__(
        self,
        *,
        counter: Counter | None = None,
        settings: PlaygroundSettingsStore | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self.settings = settings or PlaygroundSettingsStore(settings_from_env())
        self.books = BookCatalog()
        self.counter = counter or Counter()

        self.events: NotificationHub[dict[str, Any]] = NotificationHub("events")
        self.events.subscribe(self._record_event)

        self.access_events: NotificationHub[AccessEvent] = NotificationHub("person")
        self.access_events.subscribe(self._on_access)
        self.accessor: GuardedAccessor = validating_accessor(hub=self.access_events)
        self.person: RecordView = self.accessor.bind(default_person())

        self._seq = 0
        self._global_revision = 0
        self._log: deque[dict[str, Any]] = deque(maxlen=self.settings.get().event_log_limit)

    def global_revision(self) -> int:
        with self._lock:
            return self._global_revision

    def event_log(self, *, since: int = 0) -> list[dict[str, Any]]:
        with self._lock:
            return [e for e in self._log if int(e["seq"]) > int(since)]

    def publish(self, kind: str, **fields: Any) -> None:
        try:
            self.events.notify({"kind": kind, **fields})
        except NotificationError as ex:
            logger.warning("Dropped %s event: %s", kind, ex)

    def add_book(self, title: str, author: str, isbn: str, availability: bool = True, sales: int = 0) -> BookCopy:
        copy = self.books.add_book(title, author, isbn, availability, sales)
        self.publish("book.added", isbn=copy.isbn, copies=self.books.total_copies())
        return copy

    def increment_counter(self) -> int:
        count = self.counter.increment()
        self.publish("counter.changed", count=count)
        return count

    def decrement_counter(self) -> int:
        count = self.counter.decrement()
        self.publish("counter.changed", count=count)
        return count

    def update_settings(self, *, event_log_limit: int | None = None, log_level: str | None = None) -> PlaygroundSettings:
        # Validate every field before committing any of them.
        limit = normalize_event_log_limit(event_log_limit) if event_log_limit is not None else None
        level = LogLevel.from_any(log_level) if log_level is not None else None

        if limit is not None:
            updated = self.settings.set_event_log_limit(limit)
            with self._lock:
                self._log = deque(self._log, maxlen=updated.event_log_limit)
            logger.info("Event log limit set to %d", updated.event_log_limit)
        if level is not None:
            self.settings.set_log_level(level)
        return self.settings.get()

    def _on_access(self, event: AccessEvent) -> None:
        self.publish(event.kind, field=event.field, old=event.old, new=event.new)

    def _record_event(self, payload: dict[str, Any]) -> None:
        with self._lock:
            self._seq += 1
            if payload.get("kind") in _MUTATING_KINDS:
                self._global_revision += 1
            self._log.append({"seq": self._seq, "at": time.time(), **payload})


_STATES: IdentityRegistry[str, AppState] = IdentityRegistry("app-states")


def default_state() -> AppState:
    """The process-wide state. Its counter is the one created through `create_counter()`."""
    return _STATES.get_or_create("default", lambda: AppState(counter=create_counter()))
