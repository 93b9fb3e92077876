from __future__ import annotations

import logging

import pytest

from patternkit.runtime import server as server_mod
from patternkit.runtime.logs import configure_logging
from patternkit.runtime.settings import LogLevel, PlaygroundSettingsStore, settings_from_env
from patternkit.sdk.client import PatternkitClient


def test_log_level_aliases() -> None:
    assert LogLevel.from_any("WARN") is LogLevel.WARNING
    assert LogLevel.from_any(" Debug ") is LogLevel.DEBUG
    assert LogLevel.from_any(logging.ERROR) is LogLevel.ERROR
    assert LogLevel.INFO.to_logging() == logging.INFO
    with pytest.raises(ValueError):
        LogLevel.from_any("verbose")


def test_settings_store_validates_and_copies() -> None:
    store = PlaygroundSettingsStore()
    snapshot = store.get()
    snapshot.event_log_limit = 1
    assert store.get().event_log_limit == 256

    assert store.set_event_log_limit(10).event_log_limit == 10
    with pytest.raises(ValueError):
        store.set_event_log_limit(0)
    with pytest.raises(ValueError):
        store.set_event_log_limit(True)


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PATTERNKIT_LOG_LEVEL", "warn")
    assert settings_from_env().log_level == "warning"
    monkeypatch.delenv("PATTERNKIT_LOG_LEVEL")
    assert settings_from_env().log_level == "info"


def test_configure_logging_installs_one_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PATTERNKIT_LOG_LEVEL", "debug")
    logger = configure_logging()
    configure_logging()
    try:
        assert logger.name == "patternkit"
        assert logger.level == logging.DEBUG
        ours = [h for h in logger.handlers if getattr(h, "_patternkit_handler", False)]
        assert len(ours) == 1
    finally:
        for h in list(logger.handlers):
            if getattr(h, "_patternkit_handler", False):
                logger.removeHandler(h)
        logger.setLevel(logging.NOTSET)


def test_run_attaches_to_env_url(monkeypatch: pytest.MonkeyPatch) -> None:
    probed: list[str] = []

    def alive(url: str, *, timeout_s: float = 0.2) -> bool:
        probed.append(url)
        return True

    monkeypatch.setattr(server_mod, "_is_server_alive", alive)
    monkeypatch.setattr(server_mod, "configure_logging", lambda level=None: logging.getLogger("patternkit"))
    monkeypatch.setenv("PATTERNKIT_URL", "127.0.0.1:9123")

    attached = server_mod.run()

    assert isinstance(attached, PatternkitClient)
    assert attached.base_url == "http://127.0.0.1:9123"
    assert probed == ["http://127.0.0.1:9123"]


def test_run_attaches_to_explicit_port(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PATTERNKIT_URL", raising=False)
    monkeypatch.setattr(server_mod, "_is_server_alive", lambda url, *, timeout_s=0.2: True)
    monkeypatch.setattr(server_mod, "configure_logging", lambda level=None: logging.getLogger("patternkit"))

    attached = server_mod.run(host="127.0.0.1", port=8765)

    assert isinstance(attached, PatternkitClient)
    assert attached.base_url == "http://127.0.0.1:8765"


def test_normalize_base_url() -> None:
    assert server_mod._normalize_base_url("  ") == ""
    assert server_mod._normalize_base_url("localhost:8000/") == "http://localhost:8000"
    assert server_mod._normalize_base_url("https://x.test") == "https://x.test"
