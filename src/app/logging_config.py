# src/app/logging_config.py
"""
Central logging configuration for path-finding tools.

Call configure_logging() from your main entrypoint once:

    from app.logging_config import configure_logging
    configure_logging(logging.DEBUG, console=console)

With a rich Console the records are rendered by rich next to the CLI
output; without one they go to stdout as plain lines. Per-node search
tracing in `pathfinding` is noisy, so it only follows DEBUG when
`trace_search` is set.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

SEARCH_LOGGER = "pathfinding"


def configure_logging(
    level: int = logging.INFO,
    *,
    console: Optional[Console] = None,
    trace_search: bool = False,
) -> None:
    """
    Configure root logging if no handlers are attached yet.

    Args:
        level: root level (logging.INFO, logging.DEBUG, ...)
        console: render through rich on this console instead of stdout
        trace_search: let `pathfinding` debug records through at DEBUG
    """
    root = logging.getLogger()

    # Don't duplicate handlers if someone already configured logging.
    if root.handlers:
        return

    handler: logging.Handler
    if console is not None:
        handler = RichHandler(console=console, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=PLAIN_FORMAT))

    root.addHandler(handler)
    root.setLevel(level)

    search_level = level if trace_search else max(level, logging.INFO)
    logging.getLogger(SEARCH_LOGGER).setLevel(search_level)
