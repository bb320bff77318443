"""Capability interfaces the search is written against."""

from .vertex import Vertex2D, euclidean, chebyshev, manhattan
from .graph import Graph2D

__all__ = [
    "Vertex2D",
    "Graph2D",
    "euclidean",
    "chebyshev",
    "manhattan",
]
