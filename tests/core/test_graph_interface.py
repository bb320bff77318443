import pytest

from astar2d.core import Graph2D


def test_graph_is_abstract():
    with pytest.raises(TypeError):
        Graph2D()  # type: ignore[abstract]


def test_partial_graph_cannot_be_instantiated():
    class OnlyNeighbors(Graph2D):
        def neighbors(self, vertex):
            return []

    with pytest.raises(TypeError):
        OnlyNeighbors()  # type: ignore[abstract]
