# src/movement/actions.py
"""
Movement action vocabulary.

A movement script is an ordered sequence of one-byte MovementAction
codes that the playback system executes one after the other. This module
owns:

- the action codes themselves
- the per-speed walk tables and the ledge-jump table
- the fixed "path failed" script used by callers
- encode_script(): bytes view of a script (playback format)

It does NOT play anything back; that's the ScriptPlayer's job.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Iterable, Optional, Tuple

from .directions import Direction


class SpeedTier(IntEnum):
    SLOW = 0
    NORMAL = 1
    FAST = 2
    FASTER = 3


MIN_SPEED = int(SpeedTier.SLOW)
MAX_SPEED = int(SpeedTier.FASTER)


class MovementAction(IntEnum):
    """One-byte movement codes understood by the playback system."""

    NONE = 0x00

    FACE_DOWN = 0x01
    FACE_UP = 0x02
    FACE_LEFT = 0x03
    FACE_RIGHT = 0x04

    WALK_SLOW_DOWN = 0x05
    WALK_SLOW_UP = 0x06
    WALK_SLOW_LEFT = 0x07
    WALK_SLOW_RIGHT = 0x08
    WALK_SLOW_DIAGONAL_DOWN_LEFT = 0x09
    WALK_SLOW_DIAGONAL_DOWN_RIGHT = 0x0A
    WALK_SLOW_DIAGONAL_UP_LEFT = 0x0B
    WALK_SLOW_DIAGONAL_UP_RIGHT = 0x0C

    WALK_NORMAL_DOWN = 0x0D
    WALK_NORMAL_UP = 0x0E
    WALK_NORMAL_LEFT = 0x0F
    WALK_NORMAL_RIGHT = 0x10
    WALK_NORMAL_DIAGONAL_DOWN_LEFT = 0x11
    WALK_NORMAL_DIAGONAL_DOWN_RIGHT = 0x12
    WALK_NORMAL_DIAGONAL_UP_LEFT = 0x13
    WALK_NORMAL_DIAGONAL_UP_RIGHT = 0x14

    WALK_FAST_DOWN = 0x15
    WALK_FAST_UP = 0x16
    WALK_FAST_LEFT = 0x17
    WALK_FAST_RIGHT = 0x18
    WALK_FAST_DIAGONAL_DOWN_LEFT = 0x19
    WALK_FAST_DIAGONAL_DOWN_RIGHT = 0x1A
    WALK_FAST_DIAGONAL_UP_LEFT = 0x1B
    WALK_FAST_DIAGONAL_UP_RIGHT = 0x1C

    WALK_FASTER_DOWN = 0x1D
    WALK_FASTER_UP = 0x1E
    WALK_FASTER_LEFT = 0x1F
    WALK_FASTER_RIGHT = 0x20

    JUMP_2_DOWN = 0x21
    JUMP_2_UP = 0x22
    JUMP_2_LEFT = 0x23
    JUMP_2_RIGHT = 0x24

    EMOTE_X = 0x25

    STEP_END = 0xFE
    GENERATED_BEGIN = 0xF0
    GENERATED_END = 0xF1


A = MovementAction
D = Direction

_WALK_SLOW: Dict[Direction, MovementAction] = {
    D.NONE: A.NONE,
    D.SOUTH: A.WALK_SLOW_DOWN,
    D.NORTH: A.WALK_SLOW_UP,
    D.WEST: A.WALK_SLOW_LEFT,
    D.EAST: A.WALK_SLOW_RIGHT,
    D.SOUTHWEST: A.WALK_SLOW_DIAGONAL_DOWN_LEFT,
    D.SOUTHEAST: A.WALK_SLOW_DIAGONAL_DOWN_RIGHT,
    D.NORTHWEST: A.WALK_SLOW_DIAGONAL_UP_LEFT,
    D.NORTHEAST: A.WALK_SLOW_DIAGONAL_UP_RIGHT,
}

_WALK_NORMAL: Dict[Direction, MovementAction] = {
    D.NONE: A.NONE,
    D.SOUTH: A.WALK_NORMAL_DOWN,
    D.NORTH: A.WALK_NORMAL_UP,
    D.WEST: A.WALK_NORMAL_LEFT,
    D.EAST: A.WALK_NORMAL_RIGHT,
    D.SOUTHWEST: A.WALK_NORMAL_DIAGONAL_DOWN_LEFT,
    D.SOUTHEAST: A.WALK_NORMAL_DIAGONAL_DOWN_RIGHT,
    D.NORTHWEST: A.WALK_NORMAL_DIAGONAL_UP_LEFT,
    D.NORTHEAST: A.WALK_NORMAL_DIAGONAL_UP_RIGHT,
}

_WALK_FAST: Dict[Direction, MovementAction] = {
    D.NONE: A.NONE,
    D.SOUTH: A.WALK_FAST_DOWN,
    D.NORTH: A.WALK_FAST_UP,
    D.WEST: A.WALK_FAST_LEFT,
    D.EAST: A.WALK_FAST_RIGHT,
    D.SOUTHWEST: A.WALK_FAST_DIAGONAL_DOWN_LEFT,
    D.SOUTHEAST: A.WALK_FAST_DIAGONAL_DOWN_RIGHT,
    D.NORTHWEST: A.WALK_FAST_DIAGONAL_UP_LEFT,
    D.NORTHEAST: A.WALK_FAST_DIAGONAL_UP_RIGHT,
}

# No dedicated "faster" diagonals exist; fall back to the fast ones.
_WALK_FASTER: Dict[Direction, MovementAction] = {
    D.NONE: A.NONE,
    D.SOUTH: A.WALK_FASTER_DOWN,
    D.NORTH: A.WALK_FASTER_UP,
    D.WEST: A.WALK_FASTER_LEFT,
    D.EAST: A.WALK_FASTER_RIGHT,
    D.SOUTHWEST: A.WALK_FAST_DIAGONAL_DOWN_LEFT,
    D.SOUTHEAST: A.WALK_FAST_DIAGONAL_DOWN_RIGHT,
    D.NORTHWEST: A.WALK_FAST_DIAGONAL_UP_LEFT,
    D.NORTHEAST: A.WALK_FAST_DIAGONAL_UP_RIGHT,
}

_JUMP_2: Dict[Direction, MovementAction] = {
    D.NONE: A.NONE,
    D.SOUTH: A.JUMP_2_DOWN,
    D.NORTH: A.JUMP_2_UP,
    D.WEST: A.JUMP_2_LEFT,
    D.EAST: A.JUMP_2_RIGHT,
}

_FACE: Dict[Direction, MovementAction] = {
    D.SOUTH: A.FACE_DOWN,
    D.NORTH: A.FACE_UP,
    D.WEST: A.FACE_LEFT,
    D.EAST: A.FACE_RIGHT,
}

# Indexed by SpeedTier.
MOVEMENTS_BY_SPEED: Tuple[Dict[Direction, MovementAction], ...] = (
    _WALK_SLOW,
    _WALK_NORMAL,
    _WALK_FAST,
    _WALK_FASTER,
)

# Played when no path could be produced: "!"-style emote, then stop.
PATH_FAILED_SCRIPT: Tuple[MovementAction, ...] = (
    MovementAction.EMOTE_X,
    MovementAction.STEP_END,
)


def clamp_speed(speed: int) -> int:
    """Clamp an arbitrary speed request into the supported tier range."""
    return max(MIN_SPEED, min(MAX_SPEED, int(speed)))


def walk_action(speed: int, direction: Direction) -> MovementAction:
    """Walk action for one step in `direction` at the given speed tier."""
    return MOVEMENTS_BY_SPEED[speed][direction]


def jump_action(direction: Direction) -> MovementAction:
    """Two-tile ledge jump in a cardinal direction (NONE otherwise)."""
    return _JUMP_2.get(direction, MovementAction.NONE)


def face_action(direction: Direction) -> MovementAction:
    """Turn-in-place action for a cardinal facing."""
    try:
        return _FACE[direction]
    except KeyError:
        raise ValueError(f"No face action for direction {direction!r}") from None


def encode_script(actions: Iterable[MovementAction]) -> bytes:
    """Pack a movement script into the byte form the playback system reads."""
    return bytes(int(a) for a in actions)


def _build_step_lookup() -> Dict[MovementAction, Tuple[Direction, int]]:
    lookup: Dict[MovementAction, Tuple[Direction, int]] = {}
    for table in MOVEMENTS_BY_SPEED:
        for direction, action in table.items():
            if action is not MovementAction.NONE:
                lookup[action] = (direction, 1)
    for direction, action in _JUMP_2.items():
        if action is not MovementAction.NONE:
            lookup[action] = (direction, 2)
    return lookup


_STEP_LOOKUP = _build_step_lookup()


def action_step(action: MovementAction) -> Optional[Tuple[Direction, int]]:
    """
    Direction and number of tiles `action` moves the agent.

    None for actions that do not move it (faces, markers, emotes).
    """
    return _STEP_LOOKUP.get(action)
