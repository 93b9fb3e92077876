from __future__ import annotations

import logging
import numbers
from collections.abc import Iterable, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any, Callable, Literal

import numpy as np

from .errors import MissingProperty, ValidationError
from .hub import NotificationHub


logger = logging.getLogger(__name__)

Record = MutableMapping[str, Any]
Validator = Callable[[Any], None]
Presenter = Callable[[Any], Any]
AccessKind = Literal["read", "write", "missing"]


@dataclass(frozen=True)
class AccessEvent:
    kind: AccessKind
    field: str
    old: Any = None
    new: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "field": self.field, "old": self.old, "new": self.new}


@dataclass(frozen=True)
class FieldRule:
    """Hooks for one field.

    - `validate` raises `ValidationError` to reject a write.
    - `present` transforms the stored value on read; storage is never changed.
    """

    validate: Validator | None = None
    present: Presenter | None = None


def numeric(field: str, *, finite: bool = True) -> Validator:
    """Accept Python and numpy real numbers. Booleans are rejected."""

    def check(value: Any) -> None:
        if isinstance(value, (bool, np.bool_)) or isinstance(value, np.complexfloating):
            raise ValidationError(field, f"{field} must be numeric")
        if not isinstance(value, (numbers.Real, np.number)):
            raise ValidationError(field, f"{field} must be numeric")
        if finite and not isinstance(value, (numbers.Integral, np.integer)):
            try:
                ok = bool(np.isfinite(float(value)))
            except (OverflowError, TypeError):
                ok = False
            if not ok:
                raise ValidationError(field, f"{field} must be finite")

    return check


def min_length(field: str, n: int) -> Validator:
    def check(value: Any) -> None:
        if not isinstance(value, str) or len(value) < n:
            raise ValidationError(field, f"{field} must be at least {n} characters")

    return check


def one_of(field: str, choices: Iterable[Any]) -> Validator:
    allowed = tuple(choices)

    def check(value: Any) -> None:
        if value not in allowed:
            options = ", ".join(repr(c) for c in allowed)
            raise ValidationError(field, f"{field} must be one of: {options}")

    return check


class GuardedAccessor:
    """Mediates reads and writes on a plain record.

    The accessor never owns the record; it only routes access through the
    field rules. A rejected write leaves the record exactly as it was.
    """

    def __init__(
        self,
        rules: Mapping[str, FieldRule] | None = None,
        *,
        hub: NotificationHub[AccessEvent] | None = None,
        name: str = "accessor",
    ) -> None:
        self.name = name
        self.rules: dict[str, FieldRule] = dict(rules or {})
        self.hub = hub

    def validate(self, field: str, value: Any) -> None:
        rule = self.rules.get(field)
        if rule is not None and rule.validate is not None:
            rule.validate(value)

    def read(self, record: Mapping[str, Any], field: str) -> Any:
        if field not in record:
            missing = MissingProperty(field)
            logger.warning("%s: %s", self.name, missing.message)
            self._emit(AccessEvent(kind="missing", field=field))
            return None

        value = record[field]
        rule = self.rules.get(field)
        if rule is not None and rule.present is not None:
            value = rule.present(value)
        logger.debug("%s: the value of %s is %r", self.name, field, value)
        self._emit(AccessEvent(kind="read", field=field, new=value))
        return value

    def write(self, record: Record, field: str, value: Any) -> None:
        self.validate(field, value)
        old = record.get(field)
        record[field] = value
        logger.info("%s: changed %s from %r to %r", self.name, field, old, value)
        self._emit(AccessEvent(kind="write", field=field, old=old, new=value))

    def write_many(self, record: Record, values: Mapping[str, Any]) -> None:
        """Validate every field first, then commit them all."""

        for field, value in values.items():
            self.validate(field, value)
        for field, value in values.items():
            self.write(record, field, value)

    def bind(self, record: Record) -> RecordView:
        return RecordView(self, record)

    def _emit(self, event: AccessEvent) -> None:
        if self.hub is None:
            return
        try:
            self.hub.notify(event)
        except Exception:
            logger.warning("%s: failed to deliver %s event for %s", self.name, event.kind, event.field, exc_info=True)


class RecordView:
    """Explicit get/set access to one record through a `GuardedAccessor`."""

    def __init__(self, accessor: GuardedAccessor, record: Record) -> None:
        self._accessor = accessor
        self._record = record

    @property
    def record(self) -> Record:
        return self._record

    def get(self, field: str) -> Any:
        return self._accessor.read(self._record, field)

    def set(self, field: str, value: Any) -> None:
        self._accessor.write(self._record, field, value)

    def update(self, values: Mapping[str, Any]) -> None:
        self._accessor.write_many(self._record, values)

    def snapshot(self) -> dict[str, Any]:
        return {field: self._accessor.read(self._record, field) for field in list(self._record)}
