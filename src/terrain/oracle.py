# src/terrain/oracle.py
"""
Terrain Oracle: the read-only map capability handed to the pathfinder.

The pathfinder never reaches into a global map. It is given an object
implementing TerrainOracle and only asks it:

- what behavior a tile has
- what elevation a tile has (possibly the "inherit" sentinel)
- whether stepping onto a tile is a ledge jump
- whether an edge is free or blocked
- whether an edge is a slow stairs edge

Implementations must answer identically for the duration of one search.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Optional, Protocol

from movement import Direction

# Border of non-playable tiles around every map. Map-local coordinates
# plus this offset give the coordinates the search works in.
MAP_OFFSET = 7

# Elevation value meaning "elevation-agnostic" (bridges and the like).
ELEVATION_INHERIT = 15


class TileBehavior(IntEnum):
    NORMAL = 0x00
    JUMP_EAST = 0x38
    JUMP_WEST = 0x39
    JUMP_NORTH = 0x3A
    JUMP_SOUTH = 0x3B
    ROCK_STAIRS = 0x8B


class EdgeCollision(Enum):
    """Outcome of classifying one edge between two tiles."""

    NONE = "none"
    LEDGE_JUMP = "ledge_jump"
    OUTSIDE_RANGE = "outside_range"
    IMPASSABLE = "impassable"
    ELEVATION_MISMATCH = "elevation_mismatch"
    OBJECT_EVENT = "object_event"

    @property
    def is_blocked(self) -> bool:
        return self not in (EdgeCollision.NONE, EdgeCollision.LEDGE_JUMP)


class TerrainOracle(Protocol):
    """Collision / elevation / ledge classification for the search."""

    def behavior_at(self, x: int, y: int) -> int:
        ...

    def elevation_at(self, x: int, y: int) -> int:
        """Tile elevation; may be ELEVATION_INHERIT."""
        ...

    def ledge_jump_direction(
        self, direction: Direction, behavior: int
    ) -> Optional[Direction]:
        """Jump direction if moving `direction` onto `behavior` is a ledge jump."""
        ...

    def classify_edge(
        self,
        agent: Any,
        x: int,
        y: int,
        elevation: int,
        direction: Direction,
        from_behavior: int,
        to_behavior: int,
    ) -> EdgeCollision:
        """
        Collision for moving `agent` at `elevation` one step in `direction`
        onto tile (x, y).
        """
        ...

    def is_slow_stairs(
        self,
        agent: Any,
        direction: Direction,
        from_behavior: int,
        to_behavior: int,
    ) -> bool:
        ...
