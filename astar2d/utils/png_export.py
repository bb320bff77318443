"""Grid snapshots rendered with :mod:`Pillow`."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, TYPE_CHECKING

from PIL import Image, ImageDraw

if TYPE_CHECKING:
    from ..grid.d2q9 import Cell, D2Q9


FREE_COLOUR = (240, 240, 240)
WALL_COLOUR = (0, 0, 0)
PATH_COLOUR = (160, 190, 255)
START_COLOUR = (100, 220, 120)
GOAL_COLOUR = (255, 170, 80)


def draw_grid_image(
    grid: "D2Q9",
    path: Optional[Sequence["Cell"]],
    start: "Cell",
    goal: "Cell",
    cell: int = 10,
) -> Image.Image:
    """Return an ``Image`` of ``grid`` with ``cell`` pixels per square."""

    if cell <= 0:
        raise ValueError("cell size must be positive")

    img = Image.new("RGB", (grid.width * cell, grid.height * cell), FREE_COLOUR)
    draw = ImageDraw.Draw(img)

    def fill(x: int, y: int, colour: tuple[int, int, int]) -> None:
        x0, y0 = x * cell, y * cell
        draw.rectangle((x0, y0, x0 + cell - 1, y0 + cell - 1), fill=colour)

    for row in grid:
        for c in row:
            if c.is_wall:
                fill(c.x, c.y, WALL_COLOUR)
    if path:
        for c in path:
            fill(c.x, c.y, PATH_COLOUR)
    fill(start.x, start.y, START_COLOUR)
    fill(goal.x, goal.y, GOAL_COLOUR)
    return img


def draw_grid_png(
    grid: "D2Q9",
    path: Optional[Sequence["Cell"]],
    start: "Cell",
    goal: "Cell",
    out_path: str | Path,
    cell: int = 10,
) -> Path:
    """Write :func:`draw_grid_image` to ``out_path`` and return the path."""

    out = Path(out_path)
    if not out.parent.exists():
        out.parent.mkdir(parents=True, exist_ok=True)
    draw_grid_image(grid, path, start, goal, cell).save(out)
    return out


__all__ = ["draw_grid_image", "draw_grid_png"]
