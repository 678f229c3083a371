from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from movement import MAX_SPEED, MIN_SPEED


# ---------------------------------------------------------------------------
# Dataclasses for runtime settings
# ---------------------------------------------------------------------------


@dataclass
class PathfinderSettings:
    """Runtime knobs for move-to-coords requests."""

    # Drop one speed tier on rock stairs when walking north/south.
    slow_movement_on_stairs: bool = True
    # Log the wall time of each request.
    log_timing: bool = True
    # Budget used when a caller does not pass one.
    default_max_nodes: int = 1000
    # Speed tier used when a caller does not pass one.
    default_speed: int = 1


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ROOT = PROJECT_ROOT / "config"
DEFAULT_SETTINGS_PATH = CONFIG_ROOT / "pathfinder.yaml"


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML config file, requiring a mapping at the top."""
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def _as_bool(raw: Dict[str, Any], key: str, default: bool) -> bool:
    value = raw.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"'{key}' must be true or false, got {value!r}")
    return value


def _as_int(raw: Dict[str, Any], key: str, default: int) -> int:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' must be an integer, got {value!r}")
    return value


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_pathfinder_settings(path: Path | None = None) -> PathfinderSettings:
    """
    Load config/pathfinder.yaml (or `path`) into PathfinderSettings.

    Keys live under a top-level `pathfinder:` mapping; missing keys keep
    their defaults.
    """
    cfg_path = path if path is not None else DEFAULT_SETTINGS_PATH
    data = _load_yaml(cfg_path)

    raw = data.get("pathfinder") or {}
    if not isinstance(raw, dict):
        raise ValueError(f"'pathfinder' in {cfg_path} must be a mapping.")

    defaults = PathfinderSettings()
    settings = PathfinderSettings(
        slow_movement_on_stairs=_as_bool(
            raw, "slow_movement_on_stairs", defaults.slow_movement_on_stairs
        ),
        log_timing=_as_bool(raw, "log_timing", defaults.log_timing),
        default_max_nodes=_as_int(raw, "default_max_nodes", defaults.default_max_nodes),
        default_speed=_as_int(raw, "default_speed", defaults.default_speed),
    )

    _validate_settings(settings)
    return settings


def _validate_settings(settings: PathfinderSettings) -> None:
    """Minimal sanity checks for the settings."""
    if settings.default_max_nodes <= 0:
        raise ValueError(
            f"default_max_nodes must be positive, got {settings.default_max_nodes}"
        )
    if not MIN_SPEED <= settings.default_speed <= MAX_SPEED:
        raise ValueError(
            f"default_speed must be in {MIN_SPEED}..{MAX_SPEED}, got {settings.default_speed}"
        )
