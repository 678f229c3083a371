# src/pathfinding/heuristic.py
"""
Weighted Manhattan heuristic.

With a weight above 1 the estimate can overshoot, so the search returns
the first path it settles on, which is not always the shortest.
"""

from __future__ import annotations

PATH_FINDER_WEIGHT = 1.5


def manhattan_distance(x1: int, y1: int, x2: int, y2: int) -> int:
    return abs(x2 - x1) + abs(y2 - y1)


def heuristic(x: int, y: int, target_x: int, target_y: int) -> int:
    """Estimated remaining cost, floored to whole tile-steps."""
    return int(manhattan_distance(x, y, target_x, target_y) * PATH_FINDER_WEIGHT)
