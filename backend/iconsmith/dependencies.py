"""FastAPI dependency injection."""

from __future__ import annotations

from iconsmith.engine.pipeline import IconEngine, get_engine


def get_icon_engine() -> IconEngine:
    return get_engine()
