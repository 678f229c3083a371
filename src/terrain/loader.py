# src/terrain/loader.py
"""
Map files for GridTerrain.

Provides:
- load_grid_terrain: parse one map YAML (layout, elevations, occupied tiles)
- load_named_map: the same, looked up by name under config/maps/

It does NOT validate that a map is solvable; that is the search's job.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from .grid import DEFAULT_ELEVATION, GridTerrain

# Default directory for map YAML files: <repo>/config/maps/
CONFIG_MAPS_DIR = Path(__file__).resolve().parents[2] / "config" / "maps"


def _load_yaml(path: Path) -> Dict[str, Any]:
    """
    Load a YAML file into a dict.

    Returns an empty dict if the file is empty, rather than None.
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing map file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    data = data or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def _parse_occupied(raw: Any, path: Path) -> List[Tuple[int, int]]:
    occupied: List[Tuple[int, int]] = []
    for entry in raw or []:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ValueError(f"Occupied entries must be [x, y] pairs in {path}: {entry!r}")
        occupied.append((int(entry[0]), int(entry[1])))
    return occupied


def load_grid_terrain(path: Path) -> GridTerrain:
    """
    Parse a map YAML file into a GridTerrain.

    Expected shape:

        name: demo
        default_elevation: 3
        layout:
          - "....."
          - "..#.."
        elevations:        # optional, one hex digit per tile
          - "33333"
          - "33333"
        occupied:          # optional, map-local [x, y] pairs
          - [4, 1]
    """
    raw = _load_yaml(path)

    layout = raw.get("layout")
    if not isinstance(layout, list) or not layout:
        raise ValueError(f"Map {path} must define a non-empty 'layout' list.")

    elevations = raw.get("elevations")
    if elevations is not None and not isinstance(elevations, list):
        raise ValueError(f"'elevations' in {path} must be a list of rows.")

    return GridTerrain.from_rows(
        [str(row) for row in layout],
        elevations=[str(row) for row in elevations] if elevations else None,
        default_elevation=int(raw.get("default_elevation", DEFAULT_ELEVATION)),
        occupied=_parse_occupied(raw.get("occupied"), path),
    )


def load_named_map(name: str, maps_dir: Path | None = None) -> GridTerrain:
    """Load `<maps_dir>/<name>.yaml`, defaulting to config/maps/."""
    base = maps_dir if maps_dir is not None else CONFIG_MAPS_DIR
    return load_grid_terrain(base / f"{name}.yaml")
