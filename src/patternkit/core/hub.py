from __future__ import annotations

import inspect
import logging
import threading
from typing import Any, Callable, Generic, TypeVar

from .errors import NotificationError, SubscriberFailure


logger = logging.getLogger(__name__)

P = TypeVar("P")
Subscriber = Callable[[P], Any]


def _same_subscriber(a: Callable[..., Any], b: Callable[..., Any]) -> bool:
    if a is b:
        return True
    # `obj.method` builds a new bound method on every access; match on (self, func).
    return inspect.ismethod(a) and inspect.ismethod(b) and a.__self__ is b.__self__ and a.__func__ is b.__func__


class NotificationHub(Generic[P]):
    """Ordered subscriber list with isolated dispatch.

    Notes:
    - Subscribing the same callback twice is a no-op; it is called once per event.
    - `notify` walks a snapshot taken at call time, so callbacks may subscribe or
      unsubscribe while an event is being dispatched.
    - A failing subscriber never prevents later ones from running. All failures
      are raised together as one `NotificationError` once dispatch is complete.
    """

    def __init__(self, name: str = "hub") -> None:
        self.name = name
        self._lock = threading.RLock()
        self._subscribers: list[Subscriber[P]] = []

    def subscribe(self, callback: Subscriber[P]) -> None:
        if not callable(callback):
            raise TypeError("callback must be callable")
        with self._lock:
            if any(_same_subscriber(s, callback) for s in self._subscribers):
                return
            self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber[P]) -> None:
        with self._lock:
            self._subscribers = [s for s in self._subscribers if not _same_subscriber(s, callback)]

    def subscribers(self) -> list[Subscriber[P]]:
        with self._lock:
            return list(self._subscribers)

    def clear(self) -> None:
        with self._lock:
            self._subscribers.clear()

    def notify(self, payload: P) -> int:
        """Call every subscriber with `payload`; return how many succeeded."""

        snapshot = self.subscribers()
        failures: list[SubscriberFailure] = []
        delivered = 0
        for callback in snapshot:
            try:
                callback(payload)
            except Exception as ex:
                logger.debug("%s: subscriber %r failed", self.name, callback, exc_info=True)
                failures.append(SubscriberFailure(callback=callback, error=ex))
            else:
                delivered += 1

        if failures:
            raise NotificationError(failures)
        return delivered

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscribers)
