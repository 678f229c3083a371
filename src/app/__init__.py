# src/app/__init__.py
"""
Application wiring shared by entrypoints.

Provides:
- configure_logging: one stdout handler on the root logger
"""

from __future__ import annotations

from .logging_config import configure_logging

__all__ = [
    "configure_logging",
]
