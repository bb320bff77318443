"""Interface a graph must implement to be searched."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Sequence, TypeVar

from .vertex import Vertex2D


V = TypeVar("V", bound=Vertex2D)


class Graph2D(ABC, Generic[V]):
    """Abstract traversable surface over vertices of type ``V``.

    The search only ever reads from the graph.
    """

    @abstractmethod
    def neighbors(self, vertex: V) -> Sequence[V]:
        """Return every vertex one step away from ``vertex``.

        Walkability is checked separately through
        :meth:`path_is_transversable`; the order only matters for ties.
        """
        raise NotImplementedError

    @abstractmethod
    def path_is_transversable(self, vertex: V, other: V) -> bool:
        """Return ``True`` if a direct step from ``vertex`` to ``other`` is legal.

        A vertex is always transversable to itself.
        """
        raise NotImplementedError

    @abstractmethod
    def has_vertex(self, vertex: V) -> bool:
        """Return ``True`` if ``vertex`` belongs to the graph."""
        raise NotImplementedError

    @abstractmethod
    def heuristic(self, vertex: V, goal: V) -> float:
        """Return the estimated cost of reaching ``goal`` from ``vertex``."""
        raise NotImplementedError

    @abstractmethod
    def travel_cost(self, vertex: V, neighbor: V) -> float:
        """Return the exact cost of stepping from ``vertex`` to ``neighbor``."""
        raise NotImplementedError


__all__ = ["Graph2D", "V"]
