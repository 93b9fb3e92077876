from __future__ import annotations

from .core import (
    AccessEvent,
    AlreadyInitialized,
    FieldRule,
    GuardedAccessor,
    IdentityRegistry,
    MissingProperty,
    NotificationError,
    NotificationHub,
    PatternError,
    RecordView,
    SingleInstance,
    ValidationError,
)
from .runtime.server import PatternkitServer, run
from .sdk.client import PatternkitClient

__all__ = [
    "IdentityRegistry",
    "SingleInstance",
    "GuardedAccessor",
    "RecordView",
    "FieldRule",
    "AccessEvent",
    "NotificationHub",
    "PatternError",
    "AlreadyInitialized",
    "ValidationError",
    "NotificationError",
    "MissingProperty",
    "run",
    "PatternkitServer",
    "PatternkitClient",
]
