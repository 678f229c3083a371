# src/pathfinding/errors.py
"""
Errors raised by the pathfinding core.

Search failure (no path, or the node budget ran out first) is NOT an
exception: find_path returns None for both, and callers are expected to
treat them identically. Only a context that cannot be built at all
raises.
"""

from __future__ import annotations


class PathfindingError(Exception):
    """Base class for pathfinding errors."""


class ContextAllocationError(PathfindingError):
    """Backing storage for a search context could not be obtained."""

    def __init__(self, max_nodes: int, reason: str) -> None:
        super().__init__(f"Cannot allocate search context for {max_nodes} nodes: {reason}")
        self.max_nodes = max_nodes
        self.reason = reason
