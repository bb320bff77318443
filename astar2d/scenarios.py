"""Fixed maps used by the demo and the benchmark harness."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Dict, Tuple

from .grid.d2q9 import Cell, D2Q9


WIDTH = 50
HEIGHT = 20
START = (0, 19)
GOAL = (37, 1)


class Scenario(ABC):
    """A named grid with a start and a goal."""

    @abstractmethod
    def get_name(self) -> str:
        """Return the key the scenario is registered under."""
        pass

    @abstractmethod
    def build(self) -> D2Q9:
        """Return a fresh grid for this scenario."""
        pass

    def endpoints(self, grid: D2Q9) -> Tuple[Cell, Cell]:
        """Return the ``(start, goal)`` cells of ``grid``."""

        start = grid.get_at(*START)
        goal = grid.get_at(*GOAL)
        if start is None or goal is None:
            raise ValueError(f"scenario {self.get_name()!r} endpoints are off the grid")
        return start, goal


class PredicateScenario(Scenario):
    """Scenario whose walls are described by an ``is_wall(x, y)`` function."""

    def __init__(
        self,
        name: str,
        is_wall: Callable[[int, int], bool],
        width: int = WIDTH,
        height: int = HEIGHT,
    ) -> None:
        self.name = name
        self.is_wall = is_wall
        self.width = width
        self.height = height

    def get_name(self) -> str:
        return self.name

    def build(self) -> D2Q9:
        return D2Q9.from_predicate(self.width, self.height, self.is_wall)


def _spikes(x: int, y: int) -> bool:
    return (x % 10 == 3 and y > 5) or (x % 10 == 8 and y < 15)


def _hill(x: int, y: int) -> bool:
    return x < 48 and x // 5 == y and y < 15


def _l_shape(x: int, y: int) -> bool:
    return (
        (x == 5 and 3 <= y <= 5)
        or (x == 30 and 5 <= y <= 10)
        or (x == 35 and 3 <= y <= 10)
        or (y == 3 and 5 <= x <= 35)
        or (y == 5 and 5 <= x <= 30)
        or (y == 10 and 30 <= x <= 35)
    )


SCENARIOS: Dict[str, Scenario] = {
    s.get_name(): s
    for s in (
        PredicateScenario("spikes", _spikes),
        PredicateScenario("hill", _hill),
        PredicateScenario("l_shape", _l_shape),
    )
}


def get_scenario(name: str) -> Scenario:
    """Return the scenario registered as ``name``."""

    try:
        return SCENARIOS[name]
    except KeyError:
        known = ", ".join(sorted(SCENARIOS))
        raise KeyError(f"unknown scenario {name!r}; known: {known}") from None


__all__ = [
    "Scenario",
    "PredicateScenario",
    "SCENARIOS",
    "get_scenario",
    "START",
    "GOAL",
]
