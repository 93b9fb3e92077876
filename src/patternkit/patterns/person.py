from __future__ import annotations

from typing import Any

from ..core.accessor import AccessEvent, FieldRule, GuardedAccessor, min_length, numeric
from ..core.hub import NotificationHub


def default_person() -> dict[str, Any]:
    return {
        "name": "John Doe",
        "age": 42,
        "nationality": "American",
    }


def person_rules() -> dict[str, FieldRule]:
    return {
        "name": FieldRule(validate=min_length("name", 2), present=lambda v: str(v).strip()),
        "age": FieldRule(validate=numeric("age")),
    }


def logging_accessor(hub: NotificationHub[AccessEvent] | None = None) -> GuardedAccessor:
    """Pass-through accessor: every access is logged, nothing is rejected."""
    return GuardedAccessor(hub=hub, name="person")


def validating_accessor(hub: NotificationHub[AccessEvent] | None = None) -> GuardedAccessor:
    return GuardedAccessor(person_rules(), hub=hub, name="person")
