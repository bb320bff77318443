"""A* search over any :class:`~astar2d.core.graph.Graph2D`."""

from __future__ import annotations

import itertools
import logging
import math
from dataclasses import dataclass
from heapq import heappop, heappush
from typing import Callable, Dict, Generic, Iterator, List, Optional, Set, Tuple

from ..core.graph import Graph2D, V


logger = logging.getLogger(__name__)


@dataclass
class NodeInfo(Generic[V]):
    """Best known way of reaching a vertex during one search."""

    parent: Optional[V] = None
    g_score: float = math.inf
    f_score: float = math.inf


class NodeTable(Generic[V]):
    """Per-search bookkeeping keyed by vertex.

    Records are created on first access with an infinite score and no
    parent. Scores are only ever lowered.
    """

    def __init__(self) -> None:
        self._records: Dict[V, NodeInfo[V]] = {}

    def get_or_default(self, vertex: V) -> NodeInfo[V]:
        """Return the record for ``vertex``, creating a default one if needed."""
        info = self._records.get(vertex)
        if info is None:
            info = NodeInfo()
            self._records[vertex] = info
        return info

    def peek(self, vertex: V) -> Optional[NodeInfo[V]]:
        """Return the record for ``vertex`` without creating it."""
        return self._records.get(vertex)

    def seed(self, vertex: V, g_score: float, f_score: float) -> NodeInfo[V]:
        info = NodeInfo(parent=None, g_score=g_score, f_score=f_score)
        self._records[vertex] = info
        return info

    def chain(self, vertex: V) -> Iterator[V]:
        """Yield ``vertex`` then each of its ancestors up to the root."""
        current: Optional[V] = vertex
        while current is not None:
            yield current
            info = self._records.get(current)
            current = info.parent if info is not None else None

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._records

    def __len__(self) -> int:
        return len(self._records)


UpdateCallback = Callable[[V, NodeInfo[V]], None]


@dataclass
class SearchResult(Generic[V]):
    """Outcome of :func:`run_search` together with some counters."""

    path: Optional[List[V]]
    expanded: int = 0
    visited: int = 0
    estimated_visits: int = 0
    estimated_frontier: int = 0

    @property
    def found(self) -> bool:
        return self.path is not None


def estimate_capacity(start: V, goal: V) -> Tuple[int, int]:
    """Guess how many vertices a search between ``start`` and ``goal`` touches.

    Returns ``(visits, frontier)`` from the area and perimeter of the
    bounding box of the two points. Only used for reporting.
    """

    start_x, start_y = start.coords()
    goal_x, goal_y = goal.coords()
    dx = max(abs(goal_x - start_x), 1.0)
    dy = max(abs(goal_y - start_y), 1.0)
    area = dx * dy
    perimeter = 2.0 * (dx + dy)
    visits = int(area) if math.isfinite(area) else 0
    frontier = int(perimeter) if math.isfinite(perimeter) else 0
    return visits, frontier


def run_search(
    graph: Graph2D[V],
    start: V,
    goal: V,
    *,
    on_update: Optional[UpdateCallback] = None,
) -> SearchResult[V]:
    """Run A* from ``start`` to ``goal`` over ``graph``.

    The open vertex with the lowest ``f = g + h`` is expanded first; ties
    go to the vertex that entered the open set earliest. The search stops as
    soon as the goal shows up as a transversable neighbour of the expanded
    vertex, so the path is only optimal when ``graph.heuristic`` is
    admissible and consistent.

    ``on_update`` is called with ``(vertex, info)`` every time a record is
    written: once for the start and then on every improvement.
    """

    estimated_visits, estimated_frontier = estimate_capacity(start, goal)
    table: NodeTable[V] = NodeTable()
    counter = itertools.count()

    # Heap entries go stale when a vertex is improved or expanded; they are
    # skipped on pop. ``open_set`` is the authoritative membership.
    open_heap: List[Tuple[float, int, V]] = []
    open_set: Set[V] = set()

    def push(vertex: V, info: NodeInfo[V]) -> None:
        open_set.add(vertex)
        heappush(open_heap, (info.f_score, next(counter), vertex))
        if on_update is not None:
            on_update(vertex, info)

    push(start, table.seed(start, 0.0, graph.heuristic(start, goal)))

    expanded = 0
    path: Optional[List[V]] = None

    while open_set and open_heap:
        f_score, _, current = heappop(open_heap)
        current_info = table.peek(current)
        if (
            current_info is None
            or current not in open_set
            or f_score != current_info.f_score
        ):
            continue
        open_set.discard(current)
        expanded += 1

        for neighbor in graph.neighbors(current):
            if not graph.path_is_transversable(current, neighbor):
                continue
            if neighbor == goal:
                path = list(table.chain(current))
                path.reverse()
                # current is the goal itself only when start == goal
                if current != goal:
                    path.append(goal)
                break
            tentative = current_info.g_score + graph.travel_cost(current, neighbor)
            neighbor_info = table.get_or_default(neighbor)
            if tentative < neighbor_info.g_score:
                neighbor_info.g_score = tentative
                neighbor_info.f_score = tentative + graph.heuristic(neighbor, goal)
                neighbor_info.parent = current
                push(neighbor, neighbor_info)

        if path is not None:
            break

    logger.debug(
        "A* %s: %s expanded, %s visited (estimated %s visits, %s frontier)",
        "found path" if path is not None else "no path",
        expanded,
        len(table),
        estimated_visits,
        estimated_frontier,
    )
    return SearchResult(
        path=path,
        expanded=expanded,
        visited=len(table),
        estimated_visits=estimated_visits,
        estimated_frontier=estimated_frontier,
    )


def search(graph: Graph2D[V], start: V, goal: V) -> Optional[List[V]]:
    """Return the path from ``start`` to ``goal`` inclusive, or ``None``."""

    return run_search(graph, start, goal).path


__all__ = [
    "NodeInfo",
    "NodeTable",
    "SearchResult",
    "estimate_capacity",
    "run_search",
    "search",
]
