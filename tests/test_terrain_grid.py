# tests/test_terrain_grid.py
"""
Tests for GridTerrain (the in-memory terrain oracle) and the map loader.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest

from movement import Direction
from terrain import (
    ELEVATION_INHERIT,
    MAP_OFFSET,
    EdgeCollision,
    GridTerrain,
    TileBehavior,
    load_grid_terrain,
    load_named_map,
)


@dataclass
class Walker:
    x: int = 0
    y: int = 0
    elevation: int = 3


AGENT = Walker()


def classify(terrain: GridTerrain, x: int, y: int, direction: Direction, elevation: int = 3):
    sx, sy = terrain.to_search(x, y)
    return terrain.classify_edge(
        AGENT,
        sx,
        sy,
        elevation,
        direction,
        int(TileBehavior.NORMAL),
        terrain.behavior_at(sx, sy),
    )


# ---------------------------------------------------------------------------
# Tile queries
# ---------------------------------------------------------------------------


def test_coordinates_are_offset() -> None:
    terrain = GridTerrain.open_field(2, 2)

    assert terrain.to_search(0, 0) == (MAP_OFFSET, MAP_OFFSET)
    assert terrain.to_local(MAP_OFFSET + 1, MAP_OFFSET) == (1, 0)


def test_behavior_and_elevation_lookup() -> None:
    terrain = GridTerrain.from_rows(["v=s"], elevations=["5a2"])

    assert terrain.behavior_at(*terrain.to_search(0, 0)) == TileBehavior.JUMP_SOUTH
    assert terrain.behavior_at(*terrain.to_search(2, 0)) == TileBehavior.ROCK_STAIRS
    assert terrain.elevation_at(*terrain.to_search(0, 0)) == 5
    # Bridges ignore the elevation grid.
    assert terrain.elevation_at(*terrain.to_search(1, 0)) == ELEVATION_INHERIT
    assert terrain.elevation_at(*terrain.to_search(2, 0)) == 2


def test_outside_map_is_plain_ground_level() -> None:
    terrain = GridTerrain.open_field(2, 2)

    assert terrain.behavior_at(0, 0) == TileBehavior.NORMAL
    assert terrain.elevation_at(0, 0) == 0


def test_ledge_direction_must_match_drop() -> None:
    terrain = GridTerrain.open_field(1, 1)

    assert terrain.ledge_jump_direction(Direction.SOUTH, TileBehavior.JUMP_SOUTH) == Direction.SOUTH
    assert terrain.ledge_jump_direction(Direction.NORTH, TileBehavior.JUMP_SOUTH) is None
    assert terrain.ledge_jump_direction(Direction.EAST, TileBehavior.NORMAL) is None


def test_slow_stairs_only_north_south() -> None:
    terrain = GridTerrain.open_field(1, 1)
    stairs = int(TileBehavior.ROCK_STAIRS)
    normal = int(TileBehavior.NORMAL)

    assert terrain.is_slow_stairs(AGENT, Direction.SOUTH, normal, stairs)
    assert terrain.is_slow_stairs(AGENT, Direction.NORTH, stairs, normal)
    assert not terrain.is_slow_stairs(AGENT, Direction.EAST, stairs, stairs)
    assert not terrain.is_slow_stairs(AGENT, Direction.SOUTH, normal, normal)


# ---------------------------------------------------------------------------
# Edge classification
# ---------------------------------------------------------------------------


def test_classify_edge_rules() -> None:
    terrain = GridTerrain.from_rows([".#vo"], elevations=["3344"])

    assert classify(terrain, 0, 0, Direction.EAST) is EdgeCollision.NONE
    assert classify(terrain, 1, 0, Direction.EAST) is EdgeCollision.IMPASSABLE
    assert classify(terrain, 2, 0, Direction.EAST) is EdgeCollision.IMPASSABLE
    assert classify(terrain, 3, 0, Direction.EAST, elevation=4) is EdgeCollision.OBJECT_EVENT
    assert classify(terrain, 4, 0, Direction.EAST) is EdgeCollision.OUTSIDE_RANGE


def test_elevation_mismatch_rules() -> None:
    terrain = GridTerrain.from_rows(["..="], elevations=["340"])

    assert classify(terrain, 1, 0, Direction.EAST, elevation=3) is EdgeCollision.ELEVATION_MISMATCH
    assert classify(terrain, 1, 0, Direction.EAST, elevation=0) is EdgeCollision.NONE
    assert classify(terrain, 2, 0, Direction.EAST, elevation=3) is EdgeCollision.NONE


def test_blocked_property() -> None:
    assert not EdgeCollision.NONE.is_blocked
    assert not EdgeCollision.LEDGE_JUMP.is_blocked
    assert EdgeCollision.IMPASSABLE.is_blocked
    assert EdgeCollision.OUTSIDE_RANGE.is_blocked


# ---------------------------------------------------------------------------
# Construction errors
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "layout, elevations",
    [
        ([], None),
        (["...", ".."], None),
        (["..x"], None),
        (["..."], ["33"]),
    ],
)
def test_from_rows_rejects_bad_layouts(layout, elevations) -> None:
    with pytest.raises(ValueError):
        GridTerrain.from_rows(layout, elevations=elevations)


# ---------------------------------------------------------------------------
# YAML loader
# ---------------------------------------------------------------------------


def test_load_grid_terrain_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "tiny.yaml"
    path.write_text(
        "name: tiny\n"
        "default_elevation: 4\n"
        "layout:\n"
        "  - '...'\n"
        "  - '.#.'\n"
        "occupied:\n"
        "  - [2, 1]\n",
        encoding="utf-8",
    )

    terrain = load_grid_terrain(path)

    assert (terrain.width, terrain.height) == (3, 2)
    assert terrain.layout == ("...", ".#.")
    assert terrain.elevation_at(*terrain.to_search(0, 0)) == 4
    assert (2, 1) in terrain.occupied


def test_load_grid_terrain_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_grid_terrain(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "body",
    [
        "- just\n- a list\n",
        "name: empty\n",
        "layout: ['..']\noccupied: [[1]]\n",
        "layout: ['..']\nelevations: '33'\n",
    ],
)
def test_load_grid_terrain_rejects_malformed(tmp_path: Path, body: str) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(body, encoding="utf-8")

    with pytest.raises(ValueError):
        load_grid_terrain(path)


def test_bundled_maps_load() -> None:
    demo = load_named_map("demo")
    walled = load_named_map("walled")

    assert demo.width == 13 and demo.height == 8
    assert (10, 6) in demo.occupied
    assert walled.layout[2][5] == "."
