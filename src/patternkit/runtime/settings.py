from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any


class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def from_any(cls, value: Any) -> "LogLevel":
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            name = logging.getLevelName(value)
            value = name if isinstance(name, str) else ""

        v = str(value).strip().lower()
        aliases: dict[str, LogLevel] = {
            "debug": cls.DEBUG,
            "info": cls.INFO,
            "warning": cls.WARNING,
            "warn": cls.WARNING,
            "error": cls.ERROR,
            "critical": cls.ERROR,
        }
        if v in aliases:
            return aliases[v]

        raise ValueError("Unsupported log level. Use one of: debug, info, warning, error.")

    def to_logging(self) -> int:
        return int(logging.getLevelName(self.value.upper()))


DEFAULT_EVENT_LOG_LIMIT = 256


@dataclass
class PlaygroundSettings:
    """Runtime-tunable playground preferences.

    Notes:
    - `event_log_limit` bounds how many access/mutation events `/api/events` keeps.
    - `log_level` is the level of the `patternkit` logger.
    """

    event_log_limit: int = DEFAULT_EVENT_LOG_LIMIT
    log_level: str = LogLevel.INFO.value


def normalize_event_log_limit(limit: Any) -> int:
    if isinstance(limit, bool):
        raise ValueError("event_log_limit must be an integer")
    n = int(limit)
    if n <= 0:
        raise ValueError("event_log_limit must be > 0")
    return n


def settings_from_env() -> PlaygroundSettings:
    level = os.getenv("PATTERNKIT_LOG_LEVEL", "").strip()
    return PlaygroundSettings(log_level=LogLevel.from_any(level).value if level else LogLevel.INFO.value)


class PlaygroundSettingsStore:
    def __init__(self, settings: PlaygroundSettings | None = None) -> None:
        self._lock = threading.RLock()
        self._settings = settings or PlaygroundSettings()

    def get(self) -> PlaygroundSettings:
        with self._lock:
            return PlaygroundSettings(
                event_log_limit=self._settings.event_log_limit,
                log_level=self._settings.log_level,
            )

    def set_event_log_limit(self, limit: int) -> PlaygroundSettings:
        n = normalize_event_log_limit(limit)

        with self._lock:
            self._settings.event_log_limit = n
            return self.get()

    def set_log_level(self, level: str | LogLevel) -> PlaygroundSettings:
        lvl = LogLevel.from_any(level)

        with self._lock:
            self._settings.log_level = lvl.value
            logging.getLogger("patternkit").setLevel(lvl.to_logging())
            return self.get()
