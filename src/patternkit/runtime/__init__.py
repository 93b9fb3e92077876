from __future__ import annotations

from .app import create_app
from .logs import configure_logging
from .server import PatternkitServer, run
from .settings import LogLevel, PlaygroundSettings, PlaygroundSettingsStore
from .state import AppState, default_state

__all__ = [
    "create_app",
    "configure_logging",
    "PatternkitServer",
    "run",
    "LogLevel",
    "PlaygroundSettings",
    "PlaygroundSettingsStore",
    "AppState",
    "default_state",
]
