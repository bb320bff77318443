"""ASCII terminal renderer for grids and the paths found on them."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from ...grid.d2q9 import Cell, D2Q9


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

# glyph -> colour
_GLYPHS = {
    "S": "green",
    "E": "red",
    "O": "white",
    "#": "yellow",
    " ": "reset",
}


class TerminalView:
    """Minimal grid viewer, optionally using ANSI colours."""

    def __init__(self, colour: bool = False) -> None:
        self.colour = colour

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def toggle_colour(self) -> bool:
        """Toggle colour output. Returns ``True`` if enabled after toggle."""

        self.colour = not self.colour
        return self.colour

    def render_lines(
        self,
        grid: "D2Q9",
        path: Optional[Sequence["Cell"]],
        start: "Cell",
        goal: "Cell",
    ) -> list[str]:
        """Return one string per grid row.

        ``S`` marks the start, ``E`` the goal, ``O`` walls and ``#`` the
        cells on ``path``.
        """

        on_path = {(c.x, c.y) for c in path} if path else set()
        lines: list[str] = []
        for row in grid:
            glyphs: list[str] = []
            for cell in row:
                glyph = _cell_glyph(cell, on_path, start, goal)
                if self.colour:
                    glyphs.append(f"{_COLOURS[_GLYPHS[glyph]]}{glyph}")
                else:
                    glyphs.append(glyph)
            if self.colour:
                glyphs.append(_COLOURS["reset"])
            lines.append("".join(glyphs))
        return lines

    def render(
        self,
        grid: "D2Q9",
        path: Optional[Sequence["Cell"]],
        start: "Cell",
        goal: "Cell",
    ) -> None:
        """Draw ``grid`` with ``path`` to ``stdout``."""

        lines = self.render_lines(grid, path, start, goal)
        sys.stdout.write("\n".join(lines) + "\n")
        sys.stdout.flush()


# ----------------------------------------------------------------------
# Helper functions
# ----------------------------------------------------------------------


def _cell_glyph(cell: "Cell", on_path: set, start: "Cell", goal: "Cell") -> str:
    if (cell.x, cell.y) == (start.x, start.y):
        return "S"
    if (cell.x, cell.y) == (goal.x, goal.y):
        return "E"
    if cell.is_wall:
        return "O"
    if (cell.x, cell.y) in on_path:
        return "#"
    return " "


_view = TerminalView()


def get_view() -> TerminalView:
    """Return the singleton :class:`TerminalView` instance."""

    return _view


__all__ = ["TerminalView", "get_view"]
