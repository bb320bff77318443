"""Rectangular cell grid with walls and 8-directional movement."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, TYPE_CHECKING

from ..core.graph import Graph2D
from ..core.vertex import Coords, Vertex2D
from ..search.a_star import search

if TYPE_CHECKING:
    from ..utils.cli.terminal_view import TerminalView


@dataclass(frozen=True, repr=False)
class Cell(Vertex2D):
    """A single grid square."""

    x: int
    y: int
    is_wall: bool = False

    def coords(self) -> Coords:
        return (float(self.x), float(self.y))

    def __repr__(self) -> str:
        desc = "Wall" if self.is_wall else "Free"
        return f"{desc}({self.x}, {self.y})"


class D2Q9(Graph2D[Cell]):
    """Grid where each cell reaches its eight surrounding cells.

    Diagonal steps may not squeeze between two walls. Costs are Euclidean
    (1 or sqrt(2)) and the heuristic is the Chebyshev distance.
    """

    def __init__(self, cells: Sequence[Sequence[Cell]]) -> None:
        if not cells or not cells[0]:
            raise ValueError("grid must have at least one cell")
        width = len(cells[0])
        if any(len(row) != width for row in cells):
            raise ValueError("all grid rows must have the same length")
        self._cells: List[List[Cell]] = [list(row) for row in cells]

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_predicate(
        cls, width: int, height: int, is_wall: Callable[[int, int], bool]
    ) -> "D2Q9":
        """Build a ``width`` x ``height`` grid; ``is_wall(x, y)`` marks walls."""

        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        return cls(
            [
                [Cell(x, y, bool(is_wall(x, y))) for x in range(width)]
                for y in range(height)
            ]
        )

    @classmethod
    def from_rows(cls, rows: Iterable[str], wall: str = "O") -> "D2Q9":
        """Build a grid from ASCII rows, ``wall`` marking blocked cells.

        Any other character is a free cell.
        """

        lines = [row.rstrip("\n") for row in rows]
        if not lines:
            raise ValueError("map has no rows")
        return cls(
            [
                [Cell(x, y, ch == wall) for x, ch in enumerate(line)]
                for y, line in enumerate(lines)
            ]
        )

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return len(self._cells[0])

    @property
    def height(self) -> int:
        return len(self._cells)

    def get_at(self, x: int, y: int) -> Optional[Cell]:
        """Return the cell at ``(x, y)`` or ``None`` when out of bounds."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return self._cells[y][x]
        return None

    def __iter__(self) -> Iterator[List[Cell]]:
        return iter(self._cells)

    # ------------------------------------------------------------------
    # Graph2D
    # ------------------------------------------------------------------
    def has_vertex(self, vertex: Cell) -> bool:
        return self.get_at(vertex.x, vertex.y) is not None

    def neighbors(self, vertex: Cell) -> List[Cell]:
        result: List[Cell] = []
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                cell = self.get_at(vertex.x + dx, vertex.y + dy)
                if cell is not None:
                    result.append(cell)
        return result

    def path_is_transversable(self, vertex: Cell, other: Cell) -> bool:
        if vertex == other:
            return True
        if vertex.is_wall or other.is_wall:
            return False
        dx = other.x - vertex.x
        dy = other.y - vertex.y
        if (dx == 0 and abs(dy) == 1) or (dy == 0 and abs(dx) == 1):
            return True
        if abs(dx) == 1 and abs(dy) == 1:
            # No corner cutting: one of the two flanking cells must be open.
            return self._is_open(vertex.x, vertex.y + dy) or self._is_open(
                vertex.x + dx, vertex.y
            )
        return False

    def heuristic(self, vertex: Cell, goal: Cell) -> float:
        return vertex.chebyshev_distance(goal)

    def travel_cost(self, vertex: Cell, neighbor: Cell) -> float:
        return vertex.euclidean_distance(neighbor)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _is_open(self, x: int, y: int) -> bool:
        cell = self.get_at(x, y)
        return cell is not None and not cell.is_wall

    def path_and_show(
        self, start: Cell, goal: Cell, view: Optional["TerminalView"] = None
    ) -> Optional[List[Cell]]:
        """Search from ``start`` to ``goal`` and print the grid with the path."""

        path = search(self, start, goal)
        if path is None:
            return None
        if view is None:
            from ..utils.cli.terminal_view import get_view

            view = get_view()
        view.render(self, path, start, goal)
        return path


__all__ = ["Cell", "D2Q9"]
