from __future__ import annotations

from .client import PatternkitClient

__all__ = ["PatternkitClient"]
