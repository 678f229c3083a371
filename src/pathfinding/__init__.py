# src/pathfinding/__init__.py
"""
Bounded weighted-A* pathfinding on the tile grid.

Provides:
- SearchContext / EdgePolicy: one self-contained search request
- NodePool, Frontier, VisitedSet: the bounded data structures it owns
- find_path: run the search, returning a movement script or None
- reconstruct_path: parent chain -> movement script
"""

from __future__ import annotations

from .errors import ContextAllocationError, PathfindingError
from .node import NodePool, NodeRef, SearchNode
from .frontier import Frontier
from .visited import VisitedSet, next_power_of_two, spatial_hash
from .heuristic import PATH_FINDER_WEIGHT, heuristic, manhattan_distance
from .context import Agent, EdgePolicy, SearchContext, SearchStats
from .serializer import reconstruct_path
from .engine import NEIGHBORS, find_path

__all__ = [
    "ContextAllocationError",
    "PathfindingError",
    "NodePool",
    "NodeRef",
    "SearchNode",
    "Frontier",
    "VisitedSet",
    "next_power_of_two",
    "spatial_hash",
    "PATH_FINDER_WEIGHT",
    "heuristic",
    "manhattan_distance",
    "Agent",
    "EdgePolicy",
    "SearchContext",
    "SearchStats",
    "reconstruct_path",
    "find_path",
    "NEIGHBORS",
]
