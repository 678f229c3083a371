# src/pathfinding/context.py
"""
SearchContext: everything one path-finding request owns.

A context is created per request, owns its NodePool / Frontier /
VisitedSet exclusively, and is closed right after the movement script
has been produced, whether or not a path was found. Nothing is shared
between contexts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from movement import Direction, clamp_speed, normalize_facing, opposite_direction
from terrain import ELEVATION_INHERIT, MAP_OFFSET, TerrainOracle

from .errors import ContextAllocationError
from .frontier import Frontier
from .heuristic import heuristic
from .node import NodePool, NodeRef, SearchNode
from .visited import VisitedSet


class Agent(Protocol):
    """What the search needs to know about the mover."""

    x: int
    y: int
    elevation: int


@dataclass
class EdgePolicy:
    """
    Per-request hooks applied while classifying edges.

    direction_override:
        When not NONE, every free edge is redirected to this direction
        (cost and movement action included). Keeps an agent aligned to a
        corridor without changing the goal.
    slow_movement_on_stairs:
        Drop one speed tier on edges the terrain reports as slow stairs.
    """

    direction_override: Direction = Direction.NONE
    slow_movement_on_stairs: bool = True


@dataclass
class SearchStats:
    expansions: int = 0
    duplicates_skipped: int = 0
    allocation_refusals: int = 0


@dataclass
class SearchContext:
    agent: Agent
    terrain: TerrainOracle
    start_x: int
    start_y: int
    target_x: int
    target_y: int
    facing: Direction
    speed: int
    max_nodes: int
    policy: EdgePolicy
    pool: NodePool
    frontier: Frontier
    visited: VisitedSet
    current: Optional[NodeRef] = None
    stats: SearchStats = field(default_factory=SearchStats)

    @classmethod
    def create(
        cls,
        agent: Agent,
        terrain: TerrainOracle,
        target_x: int,
        target_y: int,
        *,
        facing: int | Direction | None = Direction.NONE,
        speed: int = 1,
        max_nodes: int,
        policy: EdgePolicy | None = None,
    ) -> "SearchContext":
        """
        Build a context for moving `agent` to map-local (target_x, target_y).

        The agent's own coordinates are already in search space; the
        target is shifted by MAP_OFFSET here. Speed is clamped to the
        supported tiers and facing folded onto a cardinal (or NONE).
        """
        if max_nodes < 0:
            raise ContextAllocationError(max_nodes, "node budget must not be negative")

        try:
            pool = NodePool(max_nodes)
            frontier = Frontier(pool, max_nodes)
            visited = VisitedSet(pool, max_nodes)
        except MemoryError as exc:
            raise ContextAllocationError(max_nodes, "out of memory") from exc

        return cls(
            agent=agent,
            terrain=terrain,
            start_x=agent.x,
            start_y=agent.y,
            target_x=target_x + MAP_OFFSET,
            target_y=target_y + MAP_OFFSET,
            facing=normalize_facing(facing),
            speed=clamp_speed(speed),
            max_nodes=max_nodes,
            policy=policy if policy is not None else EdgePolicy(),
            pool=pool,
            frontier=frontier,
            visited=visited,
        )

    # ------------------------------------------------------------------
    # Node creation
    # ------------------------------------------------------------------

    def create_node(
        self, x: int, y: int, direction: Direction, cost_g: int
    ) -> Optional[NodeRef]:
        """
        Reserve a node for (x, y) reached by moving `direction`.

        The parent is the node currently being expanded. Returns None once
        the node budget is spent. The reservation only counts against the
        budget after commit_node().
        """
        if self.pool.is_full:
            return None

        node = SearchNode(
            x=x,
            y=y,
            elevation=self._elevation_for(x, y),
            cost_g=cost_g,
            cost_f=cost_g + heuristic(x, y, self.target_x, self.target_y),
            parent=self.current,
            origin_direction=opposite_direction(direction),
        )
        return self.pool.reserve(node)

    def commit_node(self) -> NodeRef:
        return self.pool.commit()

    def current_node(self) -> SearchNode:
        if self.current is None:
            raise RuntimeError("No node is being expanded")
        return self.pool[self.current]

    def target_reached(self, ref: NodeRef) -> bool:
        node = self.pool[ref]
        return node.x == self.target_x and node.y == self.target_y

    def _elevation_for(self, x: int, y: int) -> int:
        elevation = self.terrain.elevation_at(x, y)
        if elevation == ELEVATION_INHERIT and self.current is not None:
            elevation = self.pool[self.current].elevation
        return elevation

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------

    @property
    def nodes_used(self) -> int:
        return len(self.pool)

    def close(self) -> None:
        """Release every node and structure owned by this context."""
        self.frontier.clear()
        self.visited.clear()
        self.pool.clear()
        self.current = None

    def __enter__(self) -> "SearchContext":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
