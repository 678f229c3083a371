# src/pathfinding/engine.py
"""
Weighted A* over a TerrainOracle.

- Manhattan heuristic scaled by PATH_FINDER_WEIGHT (first valid path, not
  the shortest).
- Cardinal steps only; ledges are taken as a single two-tile jump.
- Duplicate suppression by (x, y, elevation): the first settled node for
  a cell wins and is never reopened.
- The node budget is the only cutoff. Running out of budget and running
  out of frontier both return None.

This module does not animate anything and does not decide when to search.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from movement import (
    Direction,
    MovementAction,
    direction_vector,
    jump_action,
    step_distance,
    walk_action,
)
from terrain import EdgeCollision

from .context import SearchContext
from .node import NodeRef
from .serializer import reconstruct_path

log = logging.getLogger(__name__)

D = Direction

# Candidate directions, keyed by the direction the node was entered from.
# The start node (NONE) tries all four; every other node skips going back.
NEIGHBORS: Dict[Direction, Tuple[Direction, ...]] = {
    D.NONE: (D.SOUTH, D.NORTH, D.WEST, D.EAST),
    D.SOUTH: (D.NORTH, D.WEST, D.EAST),
    D.NORTH: (D.SOUTH, D.WEST, D.EAST),
    D.WEST: (D.SOUTH, D.NORTH, D.EAST),
    D.EAST: (D.SOUTH, D.NORTH, D.WEST),
}


def find_path(ctx: SearchContext) -> Optional[List[MovementAction]]:
    """
    Run the search described by `ctx` to completion.

    Returns the movement script for the found path (see
    reconstruct_path), or None if the target was not reached within the
    node budget.
    """
    if ctx.max_nodes == 0:
        return None

    start = ctx.create_node(ctx.start_x, ctx.start_y, Direction.NONE, 0)
    if start is None:
        return None
    ctx.pool[start].elevation = ctx.agent.elevation
    ctx.commit_node()
    ctx.frontier.push(start)

    while True:
        ref = ctx.frontier.pop()
        if ref is None:
            break

        inserted, settled = ctx.visited.try_insert(ref)
        if not inserted or settled is None:
            ctx.stats.duplicates_skipped += 1
            continue

        ctx.current = settled

        if ctx.target_reached(settled):
            log.debug(
                "find_path: target (%d, %d) reached, nodes=%d expansions=%d",
                ctx.target_x,
                ctx.target_y,
                ctx.nodes_used,
                ctx.stats.expansions,
            )
            return reconstruct_path(ctx.pool, settled, ctx.facing)

        ctx.stats.expansions += 1
        origin = ctx.pool[settled].origin_direction
        for direction in NEIGHBORS.get(origin, NEIGHBORS[D.NONE]):
            _try_create_neighbor(ctx, direction)

    log.debug(
        "find_path: no path to (%d, %d), nodes=%d/%d expansions=%d",
        ctx.target_x,
        ctx.target_y,
        ctx.nodes_used,
        ctx.max_nodes,
        ctx.stats.expansions,
    )
    return None


def _try_create_neighbor(ctx: SearchContext, direction: Direction) -> None:
    """Classify the edge from the current node in `direction` and queue it."""
    terrain = ctx.terrain
    current = ctx.current_node()

    dx, dy = direction_vector(direction)
    nx, ny = current.x + dx, current.y + dy

    next_behavior = terrain.behavior_at(nx, ny)
    current_behavior = terrain.behavior_at(current.x, current.y)
    collision = _check_collision(ctx, nx, ny, direction, current_behavior, next_behavior)

    if collision is EdgeCollision.NONE:
        override = ctx.policy.direction_override
        if override != Direction.NONE:
            direction = override
            dx, dy = direction_vector(direction)
            nx, ny = current.x + dx, current.y + dy

        cost_g = current.cost_g + step_distance(direction)
        ref = _new_candidate(ctx, nx, ny, direction, cost_g)
        if ref is None:
            return

        speed = ctx.speed
        if (
            ctx.policy.slow_movement_on_stairs
            and speed != 0
            and terrain.is_slow_stairs(ctx.agent, direction, current_behavior, next_behavior)
        ):
            speed -= 1

        ctx.pool[ref].movement_action = walk_action(speed, direction)

    elif collision is EdgeCollision.LEDGE_JUMP:
        nx, ny = current.x + dx * 2, current.y + dy * 2

        cost_g = current.cost_g + step_distance(direction) * 2
        ref = _new_candidate(ctx, nx, ny, direction, cost_g)
        if ref is None:
            return

        ctx.pool[ref].movement_action = jump_action(direction)

    else:
        return

    if ctx.frontier.push(ref):
        ctx.commit_node()


def _new_candidate(
    ctx: SearchContext, x: int, y: int, direction: Direction, cost_g: int
) -> Optional[NodeRef]:
    """Reserve a node unless the budget is spent or the cell is settled."""
    ref = ctx.create_node(x, y, direction, cost_g)
    if ref is None:
        ctx.stats.allocation_refusals += 1
        return None

    if ctx.visited.contains(ref):
        return None

    return ref


def _check_collision(
    ctx: SearchContext,
    x: int,
    y: int,
    direction: Direction,
    current_behavior: int,
    next_behavior: int,
) -> EdgeCollision:
    if ctx.terrain.ledge_jump_direction(direction, next_behavior) is not None:
        return EdgeCollision.LEDGE_JUMP

    return ctx.terrain.classify_edge(
        ctx.agent,
        x,
        y,
        ctx.current_node().elevation,
        direction,
        current_behavior,
        next_behavior,
    )
