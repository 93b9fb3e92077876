from __future__ import annotations

import logging
import threading
from collections.abc import Hashable
from typing import Callable, Generic, TypeVar

from .errors import AlreadyInitialized


logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class IdentityRegistry(Generic[K, V]):
    """Maps each key to at most one canonical instance.

    Entries are never replaced or removed, so an instance handed out for a key
    stays the instance for that key for as long as the registry lives.
    """

    def __init__(self, name: str = "registry") -> None:
        self.name = name
        self._lock = threading.RLock()
        self._instances: dict[K, V] = {}

    def get_or_create(self, key: K, factory: Callable[[], V]) -> V:
        with self._lock:
            if key in self._instances:
                return self._instances[key]
            # Factory runs under the lock so concurrent callers never build twice.
            instance = factory()
            # A re-entrant factory may have registered this key already; that one wins.
            if key in self._instances:
                return self._instances[key]
            self._instances[key] = instance
            logger.debug("%s: created instance for key %r", self.name, key)
            return instance

    def get(self, key: K) -> V | None:
        with self._lock:
            return self._instances.get(key)

    def keys(self) -> list[K]:
        with self._lock:
            return list(self._instances.keys())

    def items(self) -> list[tuple[K, V]]:
        with self._lock:
            return list(self._instances.items())

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._instances

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)


class SingleInstance(Generic[V]):
    """A slot that can be filled exactly once.

    States: uninitialized -> initialized. There is no way back; a second
    `create_once` raises `AlreadyInitialized` without calling the factory.
    """

    def __init__(self, name: str = "instance") -> None:
        self.name = name
        self._lock = threading.RLock()
        self._initialized = False
        self._instance: V | None = None

    @property
    def is_initialized(self) -> bool:
        with self._lock:
            return self._initialized

    def create_once(self, factory: Callable[[], V]) -> V:
        with self._lock:
            if self._initialized:
                raise AlreadyInitialized(self.name)
            # If the factory raises, the slot stays uninitialized.
            instance = factory()
            if self._initialized:
                raise AlreadyInitialized(self.name)
            self._instance = instance
            self._initialized = True
            logger.debug("%s: initialized", self.name)
            return instance

    def get(self) -> V:
        with self._lock:
            if not self._initialized:
                raise LookupError(f"{self.name} has not been created yet")
            return self._instance  # type: ignore[return-value]
