# src/scripting/testing/__init__.py

from __future__ import annotations

from .fakes import PlayedScript, RecordingScriptPlayer

__all__ = ["PlayedScript", "RecordingScriptPlayer"]
