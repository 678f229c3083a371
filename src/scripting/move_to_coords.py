# src/scripting/move_to_coords.py
"""
Move-to-coords: turn "walk object N to (x, y)" into a movement script.

This is the caller-side contract around the pathfinder:

- normalises the request (speed clamped to 0..3, facing folded onto the
  four cardinals, default node budget from settings)
- builds one SearchContext, runs find_path, always tears it down
- on failure substitutes PATH_FAILED_SCRIPT and emits a failure cue;
  failure is never raised and never retried
- clears the object's direction override after every request
- hands the script to the playback system, if one is wired in

It does NOT animate anything and does not decide when to path-find.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from time import perf_counter
from typing import List, Optional, Protocol, Sequence

from monitoring import EventBus, EventType, log_event
from movement import (
    PATH_FAILED_SCRIPT,
    Direction,
    MovementAction,
    clamp_speed,
    normalize_facing,
)
from pathfinding import ContextAllocationError, EdgePolicy, SearchContext, find_path
from settings import PathfinderSettings
from terrain import TerrainOracle

log = logging.getLogger(__name__)

MODULE_NAME = "scripting.move_to_coords"

# Sound played with the failure script.
FAILURE_CUE_SOUND = "SE_PIN"


@dataclass
class ObjectEvent:
    """
    A movable map object as seen by the path finder.

    x / y are search coordinates (map-local + MAP_OFFSET), the same space
    the terrain oracle answers in.
    """

    local_id: int
    x: int
    y: int
    elevation: int
    direction_override: Direction = Direction.NONE


class ScriptPlayer(Protocol):
    """Playback system that executes movement scripts."""

    def start_movement_script(
        self, local_id: int, script: Sequence[MovementAction]
    ) -> None:
        ...


@dataclass
class MoveResult:
    success: bool
    actions: List[MovementAction]
    nodes_used: int = 0
    elapsed_s: float = 0.0
    correlation_id: str = field(default_factory=lambda: uuid.uuid4().hex)


class MovementScriptRunner:
    """
    Build movement scripts for map objects.

    Public contract:
      move_object_to_coords(obj, target_x, target_y, ...) -> MoveResult

    One runner may serve many requests; every request gets its own
    SearchContext, so nothing leaks between them.
    """

    def __init__(
        self,
        terrain: TerrainOracle,
        *,
        settings: PathfinderSettings | None = None,
        bus: EventBus | None = None,
        player: ScriptPlayer | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._terrain = terrain
        self._settings = settings if settings is not None else PathfinderSettings()
        self._bus = bus
        self._player = player
        self._log = logger or log

    @property
    def settings(self) -> PathfinderSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def move_object_to_coords(
        self,
        obj: ObjectEvent,
        target_x: int,
        target_y: int,
        *,
        facing: int | Direction | None = Direction.NONE,
        speed: int | None = None,
        max_nodes: int | None = None,
    ) -> MoveResult:
        """
        Path-find `obj` to map-local (target_x, target_y) and start the script.

        Returns the generated script, or PATH_FAILED_SCRIPT when no path
        was found within the node budget.
        """
        started = perf_counter()

        facing_dir = normalize_facing(facing)
        requested_speed = self._settings.default_speed if speed is None else speed
        speed_tier = clamp_speed(requested_speed)
        if speed_tier != requested_speed:
            self._log.warning(
                "move_object_to_coords: speed %r clamped to %d", requested_speed, speed_tier
            )
        budget = self._settings.default_max_nodes if max_nodes is None else max_nodes

        result = MoveResult(success=False, actions=[])
        self._emit(
            EventType.PATH_REQUESTED,
            "Path requested",
            {
                "local_id": obj.local_id,
                "start": [obj.x, obj.y],
                "target": [target_x, target_y],
                "facing": facing_dir.name,
                "speed": speed_tier,
                "max_nodes": budget,
            },
            result.correlation_id,
        )

        policy = EdgePolicy(
            direction_override=obj.direction_override,
            slow_movement_on_stairs=self._settings.slow_movement_on_stairs,
        )

        script: Optional[List[MovementAction]] = None
        try:
            ctx = SearchContext.create(
                obj,
                self._terrain,
                target_x,
                target_y,
                facing=facing_dir,
                speed=speed_tier,
                max_nodes=budget,
                policy=policy,
            )
        except ContextAllocationError:
            self._log.exception(
                "move_object_to_coords: could not build search context for object %d",
                obj.local_id,
            )
        else:
            try:
                script = find_path(ctx)
                result.nodes_used = ctx.nodes_used
            finally:
                ctx.close()

        if script is None:
            result.actions = list(PATH_FAILED_SCRIPT)
            self._log.info(
                "move_object_to_coords: object %d found no path to (%d, %d)",
                obj.local_id,
                target_x,
                target_y,
            )
            self._emit(
                EventType.PATH_FAILED,
                "No path to target",
                {
                    "local_id": obj.local_id,
                    "target": [target_x, target_y],
                    "nodes_used": result.nodes_used,
                },
                result.correlation_id,
            )
            self._emit(
                EventType.FAILURE_CUE,
                "Path failure cue",
                {"local_id": obj.local_id, "sound": FAILURE_CUE_SOUND},
                result.correlation_id,
            )
        else:
            result.success = True
            result.actions = script
            self._log.info(
                "move_object_to_coords: object %d -> (%d, %d) in %d actions",
                obj.local_id,
                target_x,
                target_y,
                len(script),
            )
            self._emit(
                EventType.PATH_FOUND,
                "Movement script generated",
                {
                    "local_id": obj.local_id,
                    "target": [target_x, target_y],
                    "actions": [a.name for a in script],
                    "nodes_used": result.nodes_used,
                },
                result.correlation_id,
            )

        obj.direction_override = Direction.NONE

        if self._player is not None:
            self._player.start_movement_script(obj.local_id, result.actions)

        result.elapsed_s = perf_counter() - started
        if self._settings.log_timing:
            self._log.debug("Path finding time: %.3f ms", result.elapsed_s * 1000.0)

        return result

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _emit(
        self,
        event_type: EventType,
        message: str,
        payload: dict,
        correlation_id: str,
    ) -> None:
        if self._bus is None:
            return
        log_event(
            bus=self._bus,
            module=MODULE_NAME,
            event_type=event_type,
            message=message,
            payload=payload,
            correlation_id=correlation_id,
        )
