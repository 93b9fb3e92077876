from __future__ import annotations

import contextlib
import logging
import os
import socket
import threading
import time
from dataclasses import dataclass

import httpx
import uvicorn

from ..sdk.client import PatternkitClient
from .app import create_app
from .logs import configure_logging
from .settings import LogLevel
from .state import AppState


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternkitServer:
    host: str
    port: int
    url: str

    def client(self) -> PatternkitClient:
        return PatternkitClient(self.url.rstrip("/"))


def _find_free_port(host: str) -> int:
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind((host, 0))
        return int(s.getsockname()[1])


def _normalize_base_url(url: str) -> str:
    url = url.strip()
    if not url:
        return ""
    # Allow passing just host:port.
    if "://" not in url:
        url = "http://" + url
    return url.rstrip("/")


def _is_server_alive(base_url: str, *, timeout_s: float = 0.2) -> bool:
    """Best-effort probe to determine if a playground server is reachable."""

    try:
        with httpx.Client(base_url=base_url, timeout=timeout_s) as client:
            r = client.get("/healthz")
            if r.status_code != 200:
                return False
            return bool(r.json().get("ok"))
    except (httpx.HTTPError, ValueError):
        return False


def run(
    *,
    host: str = "127.0.0.1",
    port: int = 0,
    log_level: str = "info",
    access_log: bool = False,
    new_server: bool = False,
    connect_timeout_s: float = 0.2,
    state: AppState | None = None,
) -> PatternkitServer | PatternkitClient:
    """Start the playground with a single Python call.

    Behavior:
    - If PATTERNKIT_URL is set, attach to that server (client mode) unless `new_server=True`.
    - Otherwise, if `port != 0` and a server already answers at http://{host}:{port},
      attach to it unless `new_server=True`.
    - Otherwise start uvicorn in a daemon thread and return a `PatternkitServer`.
    """

    level = LogLevel.from_any(log_level).value
    configure_logging(level)

    env_url = _normalize_base_url(os.getenv("PATTERNKIT_URL", ""))

    if env_url and not new_server:
        if _is_server_alive(env_url, timeout_s=connect_timeout_s):
            logger.info("Attaching to %s", env_url)
            return PatternkitClient(env_url)

    if port != 0 and not new_server:
        default_url = _normalize_base_url(f"http://{host}:{port}")
        if _is_server_alive(default_url, timeout_s=connect_timeout_s):
            logger.info("Attaching to %s", default_url)
            return PatternkitClient(default_url)

    if port == 0:
        port = _find_free_port(host)

    app = create_app(state)

    config = uvicorn.Config(app, host=host, port=port, log_level=level, access_log=access_log)
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    # Give it a moment so a subsequent client probe doesn't race with startup.
    time.sleep(0.05)

    url = f"http://{host}:{port}/"
    logger.info("patternkit playground running at %s", url)
    return PatternkitServer(host=host, port=port, url=url)
