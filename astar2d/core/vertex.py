"""Spatial vertex interface and the distance metrics derived from it."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Tuple


Coords = Tuple[float, float]


def euclidean(a: Coords, b: Coords) -> float:
    """Return the straight-line distance between ``a`` and ``b``."""

    return math.hypot(b[0] - a[0], b[1] - a[1])


def chebyshev(a: Coords, b: Coords) -> float:
    """Return the largest axial distance between ``a`` and ``b``."""

    return max(abs(b[0] - a[0]), abs(b[1] - a[1]))


def manhattan(a: Coords, b: Coords) -> float:
    """Return the distance between ``a`` and ``b`` along the grid axes."""

    return abs(b[0] - a[0]) + abs(b[1] - a[1])


class Vertex2D(ABC):
    """A point on a 2-D surface.

    Subclasses only provide :meth:`coords`. They are also responsible for
    ``__eq__`` and ``__hash__``: the search keys its bookkeeping on vertices
    and compares them against the goal.
    """

    @abstractmethod
    def coords(self) -> Coords:
        """Return the ``(x, y)`` pair of this vertex."""
        raise NotImplementedError

    def euclidean_distance(self, other: Vertex2D) -> float:
        """``sqrt(dx**2 + dy**2)``"""
        return euclidean(self.coords(), other.coords())

    def chebyshev_distance(self, other: Vertex2D) -> float:
        """``max(|dx|, |dy|)``"""
        return chebyshev(self.coords(), other.coords())

    def manhattan_distance(self, other: Vertex2D) -> float:
        """``|dx| + |dy|``, as if diagonal moves were not allowed."""
        return manhattan(self.coords(), other.coords())


__all__ = ["Coords", "Vertex2D", "euclidean", "chebyshev", "manhattan"]
