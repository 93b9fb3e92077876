from __future__ import annotations

import threading

from ..core.registry import SingleInstance


class Counter:
    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._count = 0

    def get_count(self) -> int:
        with self._lock:
            return self._count

    def increment(self) -> int:
        with self._lock:
            self._count += 1
            return self._count

    def decrement(self) -> int:
        with self._lock:
            self._count -= 1
            return self._count


COUNTER_SLOT: SingleInstance[Counter] = SingleInstance("counter")


def create_counter(slot: SingleInstance[Counter] | None = None) -> Counter:
    """Create the process-wide counter. Only the first call succeeds.

    Consumers should receive the returned counter from whoever created it
    rather than looking it up again.
    """

    return (slot or COUNTER_SLOT).create_once(Counter)
