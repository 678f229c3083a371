# tests/test_movement.py
"""
Unit tests for the movement vocabulary.

Focus:
- direction vectors / reverses / step lengths
- speed tables (including the faster-tier diagonal fallback)
- face actions, failure script, byte encoding
"""

from __future__ import annotations

import pytest

from movement import (
    CARDINAL_DIRECTIONS,
    PATH_FAILED_SCRIPT,
    Direction,
    MovementAction,
    SpeedTier,
    action_step,
    clamp_speed,
    direction_vector,
    encode_script,
    face_action,
    jump_action,
    normalize_facing,
    opposite_direction,
    parse_direction,
    step_distance,
    walk_action,
)


def test_cardinal_vectors_use_screen_coordinates() -> None:
    assert direction_vector(Direction.SOUTH) == (0, 1)
    assert direction_vector(Direction.NORTH) == (0, -1)
    assert direction_vector(Direction.WEST) == (-1, 0)
    assert direction_vector(Direction.EAST) == (1, 0)
    assert direction_vector(Direction.NONE) == (0, 0)


def test_opposite_direction_only_for_cardinals() -> None:
    for d in CARDINAL_DIRECTIONS:
        assert opposite_direction(opposite_direction(d)) == d
    assert opposite_direction(Direction.SOUTH) == Direction.NORTH
    assert opposite_direction(Direction.WEST) == Direction.EAST
    assert opposite_direction(Direction.NONE) == Direction.NONE
    assert opposite_direction(Direction.NORTHEAST) == Direction.NONE


def test_step_distance() -> None:
    assert step_distance(Direction.NONE) == 0
    assert all(step_distance(d) == 1 for d in CARDINAL_DIRECTIONS)
    assert step_distance(Direction.SOUTHWEST) == 2


def test_walk_action_per_speed_tier() -> None:
    assert walk_action(SpeedTier.SLOW, Direction.SOUTH) == MovementAction.WALK_SLOW_DOWN
    assert walk_action(SpeedTier.NORMAL, Direction.EAST) == MovementAction.WALK_NORMAL_RIGHT
    assert walk_action(SpeedTier.FAST, Direction.NORTH) == MovementAction.WALK_FAST_UP
    assert walk_action(SpeedTier.FASTER, Direction.WEST) == MovementAction.WALK_FASTER_LEFT


def test_faster_tier_diagonals_fall_back_to_fast() -> None:
    assert (
        walk_action(SpeedTier.FASTER, Direction.SOUTHEAST)
        == MovementAction.WALK_FAST_DIAGONAL_DOWN_RIGHT
    )


def test_jump_and_face_actions() -> None:
    assert jump_action(Direction.SOUTH) == MovementAction.JUMP_2_DOWN
    assert jump_action(Direction.NORTHEAST) == MovementAction.NONE
    assert face_action(Direction.NORTH) == MovementAction.FACE_UP
    assert face_action(Direction.EAST) == MovementAction.FACE_RIGHT
    with pytest.raises(ValueError):
        face_action(Direction.NONE)


@pytest.mark.parametrize("raw, expected", [(-5, 0), (0, 0), (2, 2), (3, 3), (9, 3)])
def test_clamp_speed(raw: int, expected: int) -> None:
    assert clamp_speed(raw) == expected


def test_failure_script_ends_with_terminal_marker() -> None:
    assert PATH_FAILED_SCRIPT == (MovementAction.EMOTE_X, MovementAction.STEP_END)


def test_encode_script_is_one_byte_per_action() -> None:
    script = [
        MovementAction.GENERATED_BEGIN,
        MovementAction.WALK_NORMAL_RIGHT,
        MovementAction.GENERATED_END,
    ]
    data = encode_script(script)
    assert isinstance(data, bytes)
    assert len(data) == 3
    assert data[1] == int(MovementAction.WALK_NORMAL_RIGHT)


def test_action_step_reports_direction_and_length() -> None:
    assert action_step(MovementAction.WALK_FAST_LEFT) == (Direction.WEST, 1)
    assert action_step(MovementAction.JUMP_2_UP) == (Direction.NORTH, 2)
    assert action_step(MovementAction.FACE_DOWN) is None
    assert action_step(MovementAction.GENERATED_END) is None


def test_parse_direction_is_lenient() -> None:
    assert parse_direction("east") == Direction.EAST
    assert parse_direction(" North ") == Direction.NORTH
    assert parse_direction("none") == Direction.NONE
    assert parse_direction(None) == Direction.NONE
    assert parse_direction(3) == Direction.WEST
    with pytest.raises(ValueError):
        parse_direction("sideways")


@pytest.mark.parametrize(
    "raw, expected",
    [("2", Direction.NORTH), (" 4 ", Direction.EAST), ("0", Direction.NONE)],
)
def test_parse_direction_accepts_numeric_ids(raw: str, expected: Direction) -> None:
    assert parse_direction(raw) == expected


@pytest.mark.parametrize("raw", ["9", "-1", "2.5"])
def test_parse_direction_rejects_unknown_ids(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_direction(raw)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, Direction.NONE),
        (0, Direction.NONE),
        (Direction.SOUTH, Direction.SOUTH),
        (4, Direction.EAST),
        (5, Direction.SOUTH),
        (Direction.NORTHWEST, Direction.WEST),
        (8, Direction.EAST),
        (9, Direction.NONE),
    ],
)
def test_normalize_facing(raw, expected) -> None:
    assert normalize_facing(raw) == expected
