# src/pathfinding/serializer.py
"""Turn a goal node's parent chain into a movement script."""

from __future__ import annotations

from typing import List

from movement import Direction, MovementAction, face_action

from .node import NodePool, NodeRef


def reconstruct_path(
    pool: NodePool, goal: NodeRef, facing: Direction = Direction.NONE
) -> List[MovementAction]:
    """
    Build the script for the path ending at `goal`.

    Layout: GENERATED_BEGIN, one action per edge from start to goal, an
    optional face action when `facing` is not NONE, GENERATED_END. The
    start node contributes no action.
    """
    moves = sum(1 for node in pool.parent_chain(goal) if node.parent is not None)
    extra = 2 if facing == Direction.NONE else 3

    script: List[MovementAction] = [MovementAction.NONE] * (moves + extra)
    script[0] = MovementAction.GENERATED_BEGIN

    index = moves + 1
    for node in pool.parent_chain(goal):
        if node.parent is None:
            break
        index -= 1
        script[index] = node.movement_action

    index = moves + 1
    if facing != Direction.NONE:
        script[index] = face_action(facing)
        index += 1

    script[index] = MovementAction.GENERATED_END
    return script
