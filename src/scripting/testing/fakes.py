# src/scripting/testing/fakes.py
"""
Test helpers for the script layer.

Provides:
- RecordingScriptPlayer: in-memory ScriptPlayer for unit tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from movement import MovementAction


@dataclass
class PlayedScript:
    """Record of a script handed to RecordingScriptPlayer."""

    local_id: int
    script: List[MovementAction]


class RecordingScriptPlayer:
    """
    ScriptPlayer that only records what it was asked to play.

    No animation, no timing; scripts are kept in call order.
    """

    def __init__(self) -> None:
        self.played: List[PlayedScript] = []

    def start_movement_script(
        self, local_id: int, script: Sequence[MovementAction]
    ) -> None:
        self.played.append(PlayedScript(local_id=local_id, script=list(script)))

    @property
    def last(self) -> PlayedScript:
        if not self.played:
            raise AssertionError("No script has been played")
        return self.played[-1]
