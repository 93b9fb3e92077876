from __future__ import annotations

import logging
import os

from .settings import LogLevel


_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | LogLevel | None = None) -> logging.Logger:
    """Attach one stream handler to the `patternkit` logger.

    Safe to call repeatedly; only the level changes on later calls.
    Falls back to PATTERNKIT_LOG_LEVEL, then "info".
    """

    if level is None:
        level = os.getenv("PATTERNKIT_LOG_LEVEL", "") or LogLevel.INFO
    lvl = LogLevel.from_any(level)

    logger = logging.getLogger("patternkit")
    if not any(getattr(h, "_patternkit_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._patternkit_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(lvl.to_logging())
    return logger
