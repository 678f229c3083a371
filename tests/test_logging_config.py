# tests/test_logging_config.py

from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from app.logging_config import SEARCH_LOGGER, configure_logging


@pytest.fixture
def root_logger():
    """Root logger, restored to the pytest setup after the test."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    search = logging.getLogger(SEARCH_LOGGER)
    saved_search_level = search.level
    try:
        yield root
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
        search.setLevel(saved_search_level)


def strip_handlers(root: logging.Logger) -> None:
    # pytest attaches its capture handlers just before the test body runs,
    # so this has to happen inside the test itself.
    root.handlers = []


def test_plain_handler_by_default(root_logger) -> None:
    strip_handlers(root_logger)

    configure_logging(logging.DEBUG)

    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0], logging.StreamHandler)
    assert root_logger.level == logging.DEBUG
    # Search tracing stays quiet unless asked for.
    assert logging.getLogger(SEARCH_LOGGER).level == logging.INFO


def test_rich_handler_with_console_and_trace(root_logger) -> None:
    strip_handlers(root_logger)
    console = Console(file=io.StringIO())

    configure_logging(logging.DEBUG, console=console, trace_search=True)

    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0], RichHandler)
    assert logging.getLogger(SEARCH_LOGGER).level == logging.DEBUG


def test_second_call_is_a_no_op(root_logger) -> None:
    strip_handlers(root_logger)

    configure_logging()
    configure_logging(logging.DEBUG)

    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.INFO


def test_existing_handlers_are_left_alone(root_logger) -> None:
    strip_handlers(root_logger)
    existing = logging.NullHandler()
    root_logger.addHandler(existing)

    configure_logging(logging.DEBUG)

    assert root_logger.handlers == [existing]
