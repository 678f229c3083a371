# src/settings/__init__.py

from __future__ import annotations

from .loader import (
    DEFAULT_SETTINGS_PATH,
    PathfinderSettings,
    load_pathfinder_settings,
)

__all__ = [
    "DEFAULT_SETTINGS_PATH",
    "PathfinderSettings",
    "load_pathfinder_settings",
]
