# src/cli/find_path.py
"""
Offline path-finding tool.

Loads a map YAML, runs one move-to-coords request against it and prints
the generated movement script plus the map with the route drawn on it.

    python -m cli.find_path --map config/maps/demo.yaml --start 0 0 --target 12 7
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Set, Tuple

from rich.console import Console
from rich.table import Table
from rich.text import Text

from app.logging_config import configure_logging
from monitoring import EventBus, EventType, JsonFileLogger
from movement import MovementAction, action_step, direction_vector, parse_direction
from scripting import MovementScriptRunner, ObjectEvent
from settings import PathfinderSettings, load_pathfinder_settings
from terrain import GridTerrain, load_grid_terrain

LocalCoord = Tuple[int, int]

_TILE_STYLES = {
    "#": "bold white on grey23",
    "=": "cyan",
    "s": "yellow",
    "o": "magenta",
}


def trace_route(start: LocalCoord, actions: Sequence[MovementAction]) -> List[LocalCoord]:
    """Tiles visited by replaying `actions` from `start` (start included)."""
    x, y = start
    route = [start]
    for action in actions:
        step = action_step(action)
        if step is None:
            continue
        direction, tiles = step
        dx, dy = direction_vector(direction)
        x, y = x + dx * tiles, y + dy * tiles
        route.append((x, y))
    return route


def render_map(
    layout: Sequence[str],
    route: Sequence[LocalCoord],
    start: LocalCoord,
    target: LocalCoord,
) -> Text:
    on_route: Set[LocalCoord] = set(route)
    text = Text()
    for y, row in enumerate(layout):
        for x, ch in enumerate(row):
            if (x, y) == start:
                text.append("S", style="bold green")
            elif (x, y) == target:
                text.append("T", style="bold red")
            elif (x, y) in on_route:
                text.append("*", style="bold bright_yellow")
            else:
                text.append(ch, style=_TILE_STYLES.get(ch, "dim"))
        text.append("\n")
    return text


def render_actions(actions: Sequence[MovementAction]) -> Table:
    table = Table(title="Movement script")
    table.add_column("#", justify="right")
    table.add_column("Action")
    table.add_column("Code", justify="right")
    for i, action in enumerate(actions):
        table.add_row(str(i), action.name, f"0x{int(action):02X}")
    return table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a movement script on a tile map (weighted A*)."
    )
    parser.add_argument("--map", required=True, type=Path, help="Map YAML file")
    parser.add_argument(
        "--start", required=True, nargs=2, type=int, metavar=("X", "Y"),
        help="Start tile (map-local)",
    )
    parser.add_argument(
        "--target", required=True, nargs=2, type=int, metavar=("X", "Y"),
        help="Target tile (map-local)",
    )
    parser.add_argument(
        "--facing", type=parse_direction, default="none",
        help="Final facing: south/north/west/east/none or a direction id",
    )
    parser.add_argument("--speed", type=int, default=None, help="Speed tier 0-3")
    parser.add_argument("--max-nodes", type=int, default=None, help="Node budget")
    parser.add_argument(
        "--elevation", type=int, default=None,
        help="Start elevation (defaults to the start tile's elevation)",
    )
    parser.add_argument(
        "--override", type=parse_direction, default="none",
        help="Forced direction for free edges (name or id)",
    )
    parser.add_argument("--config", type=Path, default=None, help="pathfinder.yaml to use")
    parser.add_argument("--events-log", type=Path, default=None, help="Write events as JSON lines")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    parser.add_argument(
        "--trace-search", action="store_true", help="Include per-search debug records"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()
    configure_logging(
        logging.DEBUG if args.verbose else logging.INFO,
        console=console,
        trace_search=args.trace_search,
    )

    settings = (
        load_pathfinder_settings(args.config) if args.config is not None else PathfinderSettings()
    )
    terrain: GridTerrain = load_grid_terrain(args.map)

    start: LocalCoord = (args.start[0], args.start[1])
    target: LocalCoord = (args.target[0], args.target[1])
    sx, sy = terrain.to_search(*start)
    elevation = args.elevation if args.elevation is not None else terrain.elevation_at(sx, sy)

    obj = ObjectEvent(
        local_id=1,
        x=sx,
        y=sy,
        elevation=elevation,
        direction_override=args.override,
    )

    bus = EventBus()
    bus.subscribe(
        lambda evt: console.print(f"[magenta]({evt.payload.get('sound')})[/magenta]"),
        event_types={EventType.FAILURE_CUE},
    )
    events_logger = JsonFileLogger(args.events_log, bus) if args.events_log else None
    try:
        runner = MovementScriptRunner(terrain, settings=settings, bus=bus)
        result = runner.move_object_to_coords(
            obj,
            target[0],
            target[1],
            facing=args.facing,
            speed=args.speed,
            max_nodes=args.max_nodes,
        )
    finally:
        if events_logger is not None:
            events_logger.close()

    console.print(render_actions(result.actions))
    route = trace_route(start, result.actions) if result.success else [start]
    console.print(render_map(terrain.layout, route, start, target))

    if result.success:
        console.print(
            f"[green]Path found[/green]: {len(route) - 1} moves, "
            f"{result.nodes_used} nodes, {result.elapsed_s * 1000.0:.2f} ms"
        )
        return 0

    console.print(f"[red]No path[/red] within {result.nodes_used} nodes")
    return 1


if __name__ == "__main__":
    sys.exit(main())
