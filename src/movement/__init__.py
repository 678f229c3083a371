# src/movement/__init__.py
"""
Movement vocabulary shared by the pathfinder, the script runner and tools.

Provides:
- Direction plus vector / reverse helpers
- MovementAction codes and the walk / jump / face tables
- PATH_FAILED_SCRIPT and encode_script
"""

from __future__ import annotations

from .directions import (
    CARDINAL_DIRECTIONS,
    Direction,
    direction_vector,
    normalize_facing,
    opposite_direction,
    parse_direction,
    step_distance,
)
from .actions import (
    MAX_SPEED,
    MIN_SPEED,
    PATH_FAILED_SCRIPT,
    action_step,
    MovementAction,
    SpeedTier,
    clamp_speed,
    encode_script,
    face_action,
    jump_action,
    walk_action,
)

__all__ = [
    "CARDINAL_DIRECTIONS",
    "Direction",
    "direction_vector",
    "normalize_facing",
    "opposite_direction",
    "parse_direction",
    "step_distance",
    "MAX_SPEED",
    "MIN_SPEED",
    "PATH_FAILED_SCRIPT",
    "action_step",
    "MovementAction",
    "SpeedTier",
    "clamp_speed",
    "encode_script",
    "face_action",
    "jump_action",
    "walk_action",
]
