from __future__ import annotations

from .accessor import AccessEvent, FieldRule, GuardedAccessor, RecordView, min_length, numeric, one_of
from .errors import (
    AlreadyInitialized,
    MissingProperty,
    NotificationError,
    PatternError,
    SubscriberFailure,
    ValidationError,
)
from .hub import NotificationHub
from .registry import IdentityRegistry, SingleInstance

__all__ = [
    "PatternError",
    "AlreadyInitialized",
    "ValidationError",
    "NotificationError",
    "SubscriberFailure",
    "MissingProperty",
    "IdentityRegistry",
    "SingleInstance",
    "NotificationHub",
    "AccessEvent",
    "FieldRule",
    "GuardedAccessor",
    "RecordView",
    "numeric",
    "min_length",
    "one_of",
]
