# src/scripting/__init__.py
"""
Script-layer entry point for generated movement.

Provides:
- ObjectEvent: the movable object a request is made for
- MovementScriptRunner: move_object_to_coords -> MoveResult
- ScriptPlayer: protocol of the playback system the scripts go to
"""

from __future__ import annotations

from .move_to_coords import (
    FAILURE_CUE_SOUND,
    MoveResult,
    MovementScriptRunner,
    ObjectEvent,
    ScriptPlayer,
)

__all__ = [
    "FAILURE_CUE_SOUND",
    "MoveResult",
    "MovementScriptRunner",
    "ObjectEvent",
    "ScriptPlayer",
]
