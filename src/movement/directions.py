# src/movement/directions.py
"""
Facing / travel directions on the tile grid.

Screen convention: x grows to the east, y grows to the south.
The numeric values are the ones the movement scripts use, so they must
stay stable.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Dict, Tuple

log = logging.getLogger(__name__)


class Direction(IntEnum):
    NONE = 0
    SOUTH = 1
    NORTH = 2
    WEST = 3
    EAST = 4
    SOUTHWEST = 5
    SOUTHEAST = 6
    NORTHWEST = 7
    NORTHEAST = 8


CARDINAL_DIRECTIONS: Tuple[Direction, ...] = (
    Direction.SOUTH,
    Direction.NORTH,
    Direction.WEST,
    Direction.EAST,
)

_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.NONE: (0, 0),
    Direction.SOUTH: (0, 1),
    Direction.NORTH: (0, -1),
    Direction.WEST: (-1, 0),
    Direction.EAST: (1, 0),
    Direction.SOUTHWEST: (-1, 1),
    Direction.SOUTHEAST: (1, 1),
    Direction.NORTHWEST: (-1, -1),
    Direction.NORTHEAST: (1, -1),
}

_OPPOSITES: Dict[Direction, Direction] = {
    Direction.SOUTH: Direction.NORTH,
    Direction.NORTH: Direction.SOUTH,
    Direction.WEST: Direction.EAST,
    Direction.EAST: Direction.WEST,
}


def direction_vector(direction: Direction) -> Tuple[int, int]:
    """Return the (dx, dy) offset of a single step in `direction`."""
    return _VECTORS[direction]


def opposite_direction(direction: Direction) -> Direction:
    """
    Reverse of a cardinal direction.

    Diagonals and NONE have no tracked reverse and map to NONE.
    """
    return _OPPOSITES.get(direction, Direction.NONE)


def step_distance(direction: Direction) -> int:
    """Manhattan length of one step: 0 for NONE, 1 cardinal, 2 diagonal."""
    dx, dy = _VECTORS[direction]
    return abs(dx) + abs(dy)


def parse_direction(value: str | int | Direction | None) -> Direction:
    """
    Lenient parser used by the CLI and the config layer.

    Accepts enum members, ints, numeric strings ("2") and case-insensitive
    names; None and "none"/"" are Direction.NONE. Raises ValueError for
    anything else.
    """
    if value is None:
        return Direction.NONE
    if isinstance(value, Direction):
        return value
    if isinstance(value, int):
        return Direction(value)

    name = str(value).strip().upper()
    if not name:
        return Direction.NONE
    if name.lstrip("-").isdigit():
        return Direction(int(name))
    try:
        return Direction[name]
    except KeyError:
        raise ValueError(f"Unknown direction: {value!r}") from None


def normalize_facing(facing: int | Direction | None) -> Direction:
    """
    Fold a requested final facing onto NONE or one of the four cardinals.

    Values above EAST are shifted down by EAST (diagonal ids land on a
    cardinal); anything still out of range means "no final facing".
    """
    if facing is None:
        return Direction.NONE

    value = int(facing)
    if value > Direction.EAST:
        value -= Direction.EAST

    if value == Direction.NONE:
        return Direction.NONE
    for direction in CARDINAL_DIRECTIONS:
        if value == direction:
            return direction

    log.warning("normalize_facing: unsupported facing %r, ignoring", facing)
    return Direction.NONE
