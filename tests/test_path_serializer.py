# tests/test_path_serializer.py

from __future__ import annotations

import pytest

from movement import Direction, MovementAction
from pathfinding import NodePool, SearchNode, reconstruct_path

A = MovementAction


def chain(*actions: MovementAction) -> tuple[NodePool, int]:
    """Pool holding a root plus one node per action, each parented on the last."""
    pool = NodePool(len(actions) + 1)
    parent = None
    for i, action in enumerate((A.NONE,) + actions):
        pool.reserve(
            SearchNode(
                x=i,
                y=0,
                elevation=3,
                cost_g=i,
                cost_f=i,
                parent=parent,
                origin_direction=Direction.WEST if parent is not None else Direction.NONE,
                movement_action=action,
            )
        )
        parent = pool.commit()
    assert parent is not None
    return pool, parent


def test_actions_run_from_start_to_goal() -> None:
    pool, goal = chain(A.WALK_NORMAL_RIGHT, A.JUMP_2_DOWN, A.WALK_FAST_LEFT)

    assert reconstruct_path(pool, goal) == [
        A.GENERATED_BEGIN,
        A.WALK_NORMAL_RIGHT,
        A.JUMP_2_DOWN,
        A.WALK_FAST_LEFT,
        A.GENERATED_END,
    ]


def test_root_only_gives_markers() -> None:
    pool, goal = chain()

    assert reconstruct_path(pool, goal) == [A.GENERATED_BEGIN, A.GENERATED_END]


@pytest.mark.parametrize(
    "facing, face",
    [
        (Direction.SOUTH, A.FACE_DOWN),
        (Direction.NORTH, A.FACE_UP),
        (Direction.WEST, A.FACE_LEFT),
        (Direction.EAST, A.FACE_RIGHT),
    ],
)
def test_facing_appended_before_end(facing: Direction, face: MovementAction) -> None:
    pool, goal = chain(A.WALK_SLOW_UP)

    assert reconstruct_path(pool, goal, facing) == [
        A.GENERATED_BEGIN,
        A.WALK_SLOW_UP,
        face,
        A.GENERATED_END,
    ]


def test_no_placeholder_actions_remain() -> None:
    pool, goal = chain(*([A.WALK_NORMAL_DOWN] * 12))

    script = reconstruct_path(pool, goal, Direction.EAST)

    assert len(script) == 12 + 3
    assert A.NONE not in script
