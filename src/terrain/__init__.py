# src/terrain/__init__.py
"""
Terrain boundary for the pathfinder.

Provides:
- TerrainOracle: protocol the search queries (collision, elevation, ledges)
- EdgeCollision / TileBehavior and the map constants
- GridTerrain: in-memory oracle built from text rows
- load_grid_terrain: GridTerrain from a map YAML file
"""

from __future__ import annotations

from .oracle import (
    ELEVATION_INHERIT,
    MAP_OFFSET,
    EdgeCollision,
    TerrainOracle,
    TileBehavior,
)
from .grid import DEFAULT_ELEVATION, GridTerrain, Tile
from .loader import CONFIG_MAPS_DIR, load_grid_terrain, load_named_map

__all__ = [
    "ELEVATION_INHERIT",
    "MAP_OFFSET",
    "EdgeCollision",
    "TerrainOracle",
    "TileBehavior",
    "DEFAULT_ELEVATION",
    "GridTerrain",
    "Tile",
    "CONFIG_MAPS_DIR",
    "load_grid_terrain",
    "load_named_map",
]
