# tests/conftest.py
import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """``main.bootstrap`` reconfigures the root logger; undo it per test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _plain_terminal_view():
    """The shared view keeps its colour flag between commands; reset it."""
    from astar2d.utils.cli.terminal_view import get_view

    view = get_view()
    view.colour = False
    yield
    view.colour = False
