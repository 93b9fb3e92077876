from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


SINGLE_INSTANCE_MESSAGE = "You can only create one instance!"


class PatternError(Exception):
    """Base class for every error raised by patternkit."""


class AlreadyInitialized(PatternError, RuntimeError):
    def __init__(self, slot: str = "", message: str = SINGLE_INSTANCE_MESSAGE) -> None:
        super().__init__(message)
        self.slot = slot


class ValidationError(PatternError, ValueError):
    """A guarded write was rejected by a field rule.

    `str(err)` is the human readable reason, e.g. "age must be numeric".
    """

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(reason)
        self.field = field
        self.reason = reason

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "reason": self.reason}


@dataclass(frozen=True)
class SubscriberFailure:
    callback: Callable[[Any], Any]
    error: Exception


class NotificationError(PatternError):
    """Raised once by `NotificationHub.notify` after all subscribers ran."""

    def __init__(self, failures: list[SubscriberFailure]) -> None:
        self.failures = list(failures)
        noun = "subscriber" if len(self.failures) == 1 else "subscribers"
        details = "; ".join(f"{_callback_name(f.callback)}: {f.error!r}" for f in self.failures)
        super().__init__(f"{len(self.failures)} {noun} failed: {details}")

    @property
    def errors(self) -> list[Exception]:
        return [f.error for f in self.failures]


@dataclass(frozen=True)
class MissingProperty:
    """Advisory record of a guarded read on an absent field. Never raised."""

    field: str

    @property
    def message(self) -> str:
        return f"Property '{self.field}' doesn't seem to exist on the target record"


def _callback_name(callback: Callable[[Any], Any]) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)
