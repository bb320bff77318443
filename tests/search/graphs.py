"""Small hand-written graphs shared by the search tests."""

from __future__ import annotations

from dataclasses import dataclass

from astar2d.core import Graph2D, Vertex2D


@dataclass(frozen=True)
class Point(Vertex2D):
    x: int
    y: int

    def coords(self):
        return (float(self.x), float(self.y))


class AdjacencyGraph(Graph2D[Point]):
    """Explicit edge list with Manhattan costs and heuristic."""

    def __init__(self, edges, self_loops: bool = False) -> None:
        self.adjacent: dict[Point, list[Point]] = {}
        for a, b in edges:
            self.adjacent.setdefault(a, []).append(b)
            self.adjacent.setdefault(b, []).append(a)
        self.self_loops = self_loops
        self.transversable_calls: list[tuple[Point, Point]] = []
        self.neighbor_count = 0

    def neighbors(self, vertex):
        result = list(self.adjacent.get(vertex, []))
        if self.self_loops:
            result.insert(0, vertex)
        self.neighbor_count += len(result)
        return result

    def path_is_transversable(self, vertex, other):
        self.transversable_calls.append((vertex, other))
        return vertex == other or other in self.adjacent.get(vertex, [])

    def has_vertex(self, vertex):
        return vertex in self.adjacent

    def heuristic(self, vertex, goal):
        return vertex.manhattan_distance(goal)

    def travel_cost(self, vertex, neighbor):
        return vertex.manhattan_distance(neighbor)
