from __future__ import annotations

from fastapi import FastAPI

from ..api import create_api_app
from .state import AppState, default_state


def create_app(state: AppState | None = None) -> FastAPI:
    """Create the playground API.

    Without an explicit state the process-wide default state is used.
    For uvicorn: `uvicorn patternkit.runtime.app:create_app --factory`.
    """

    return create_api_app(state if state is not None else default_state())
