# src/terrain/grid.py
"""
GridTerrain: an in-memory TerrainOracle over a small tile map.

This is what tests and the CLI path-find over. It knows nothing about
search; it only answers tile questions, following the usual overworld
rules:

- tiles outside the map are OUTSIDE_RANGE
- walls are IMPASSABLE, and so are ledges entered against their drop
- a mover at a non-zero elevation cannot enter a tile at a different,
  concrete elevation (ELEVATION_MISMATCH)
- tiles holding another object are OBJECT_EVENT

Layout characters:

    .   floor
    #   wall
    v ^ < >   ledge dropping south / north / west / east
    =   bridge deck (elevation-agnostic)
    s   rock stairs (slow when walked north/south)
    o   floor occupied by another object
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from movement import Direction

from .oracle import ELEVATION_INHERIT, MAP_OFFSET, EdgeCollision, TileBehavior

LocalCoord = Tuple[int, int]

DEFAULT_ELEVATION = 3

_LEDGE_BEHAVIORS: Dict[str, TileBehavior] = {
    "v": TileBehavior.JUMP_SOUTH,
    "^": TileBehavior.JUMP_NORTH,
    "<": TileBehavior.JUMP_WEST,
    ">": TileBehavior.JUMP_EAST,
}

_JUMP_DIRECTIONS: Dict[int, Direction] = {
    TileBehavior.JUMP_SOUTH: Direction.SOUTH,
    TileBehavior.JUMP_NORTH: Direction.NORTH,
    TileBehavior.JUMP_WEST: Direction.WEST,
    TileBehavior.JUMP_EAST: Direction.EAST,
}

_VALID_CHARS = frozenset(".#=so") | frozenset(_LEDGE_BEHAVIORS)


@dataclass(frozen=True)
class Tile:
    behavior: int = TileBehavior.NORMAL
    elevation: int = DEFAULT_ELEVATION
    impassable: bool = False


@dataclass
class GridTerrain:
    """
    Read-only tile map implementing the TerrainOracle protocol.

    Tiles are stored in map-local coordinates; every oracle query takes
    search coordinates (map-local + MAP_OFFSET).
    """

    width: int
    height: int
    tiles: List[List[Tile]]
    occupied: FrozenSet[LocalCoord] = field(default_factory=frozenset)
    layout: Tuple[str, ...] = ()
    offset: int = MAP_OFFSET

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_rows(
        cls,
        layout: Sequence[str],
        *,
        elevations: Optional[Sequence[str]] = None,
        default_elevation: int = DEFAULT_ELEVATION,
        occupied: Iterable[LocalCoord] = (),
        offset: int = MAP_OFFSET,
    ) -> "GridTerrain":
        """
        Build a map from text rows (see module docstring for characters).

        `elevations`, when given, must match the layout shape and hold one
        hex digit per tile. Bridge tiles are always elevation-agnostic.
        """
        if not layout:
            raise ValueError("Map layout must contain at least one row.")

        width = len(layout[0])
        if any(len(row) != width for row in layout):
            raise ValueError("Map layout rows must all have the same width.")
        if elevations is not None:
            if len(elevations) != len(layout) or any(
                len(row) != width for row in elevations
            ):
                raise ValueError("Elevation rows must match the layout shape.")

        occupied_set = set(occupied)
        tiles: List[List[Tile]] = []

        for y, row in enumerate(layout):
            tile_row: List[Tile] = []
            for x, ch in enumerate(row):
                if ch not in _VALID_CHARS:
                    raise ValueError(f"Unknown map character {ch!r} at ({x}, {y})")

                elevation = default_elevation
                if elevations is not None:
                    elevation = int(elevations[y][x], 16)

                if ch == "#":
                    tile = Tile(elevation=elevation, impassable=True)
                elif ch in _LEDGE_BEHAVIORS:
                    tile = Tile(behavior=_LEDGE_BEHAVIORS[ch], elevation=elevation)
                elif ch == "=":
                    tile = Tile(elevation=ELEVATION_INHERIT)
                elif ch == "s":
                    tile = Tile(behavior=TileBehavior.ROCK_STAIRS, elevation=elevation)
                else:
                    if ch == "o":
                        occupied_set.add((x, y))
                    tile = Tile(elevation=elevation)
                tile_row.append(tile)
            tiles.append(tile_row)

        return cls(
            width=width,
            height=len(layout),
            tiles=tiles,
            occupied=frozenset(occupied_set),
            layout=tuple(layout),
            offset=offset,
        )

    @classmethod
    def open_field(cls, width: int, height: int, **kwargs: Any) -> "GridTerrain":
        """Obstacle-free rectangle at a single elevation."""
        return cls.from_rows(["." * width] * height, **kwargs)

    # ------------------------------------------------------------------
    # Coordinate helpers
    # ------------------------------------------------------------------

    def to_local(self, x: int, y: int) -> LocalCoord:
        return x - self.offset, y - self.offset

    def to_search(self, x: int, y: int) -> LocalCoord:
        return x + self.offset, y + self.offset

    def _tile(self, x: int, y: int) -> Optional[Tile]:
        lx, ly = self.to_local(x, y)
        if 0 <= lx < self.width and 0 <= ly < self.height:
            return self.tiles[ly][lx]
        return None

    # ------------------------------------------------------------------
    # TerrainOracle
    # ------------------------------------------------------------------

    def behavior_at(self, x: int, y: int) -> int:
        tile = self._tile(x, y)
        return int(tile.behavior) if tile is not None else int(TileBehavior.NORMAL)

    def elevation_at(self, x: int, y: int) -> int:
        tile = self._tile(x, y)
        return tile.elevation if tile is not None else 0

    def ledge_jump_direction(
        self, direction: Direction, behavior: int
    ) -> Optional[Direction]:
        if _JUMP_DIRECTIONS.get(behavior) == direction:
            return direction
        return None

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
        tile = self._tile(x, y)
        if tile is None:
            return EdgeCollision.OUTSIDE_RANGE

        if tile.impassable:
            return EdgeCollision.IMPASSABLE

        # Ledges only work downhill; entering one any other way is a wall.
        jump = _JUMP_DIRECTIONS.get(to_behavior)
        if jump is not None and jump != direction:
            return EdgeCollision.IMPASSABLE

        if self._is_elevation_mismatch(elevation, tile):
            return EdgeCollision.ELEVATION_MISMATCH

        if self.to_local(x, y) in self.occupied:
            return EdgeCollision.OBJECT_EVENT

        return EdgeCollision.NONE

    def is_slow_stairs(
        self,
        agent: Any,
        direction: Direction,
        from_behavior: int,
        to_behavior: int,
    ) -> bool:
        if direction not in (Direction.NORTH, Direction.SOUTH):
            return False
        return TileBehavior.ROCK_STAIRS in (from_behavior, to_behavior)

    @staticmethod
    def _is_elevation_mismatch(elevation: int, tile: Tile) -> bool:
        if elevation == 0:
            return False
        if tile.elevation in (0, ELEVATION_INHERIT):
            return False
        return tile.elevation != elevation
