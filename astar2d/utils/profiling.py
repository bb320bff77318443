"""Benchmark and cProfile helpers for the search."""

from __future__ import annotations

import cProfile
import logging
import pstats
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from ..core.graph import Graph2D, V
from ..scenarios import Scenario
from ..search.a_star import search
from .observer import log_event, record_search


logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Timings of repeated searches over one scenario."""

    name: str
    iterations: int
    found: bool
    path_length: int
    durations: List[float] = field(default_factory=list)

    @property
    def mean(self) -> float:
        return sum(self.durations) / len(self.durations) if self.durations else 0.0

    @property
    def best(self) -> float:
        return min(self.durations, default=0.0)

    @property
    def worst(self) -> float:
        return max(self.durations, default=0.0)

    def summary(self) -> str:
        return (
            f"{self.name:10s} | found={self.found!s:5s} | len={self.path_length:3d} | "
            f"n={self.iterations:5d} | mean={self.mean * 1000:8.3f} ms | "
            f"min={self.best * 1000:8.3f} ms | max={self.worst * 1000:8.3f} ms"
        )


def benchmark(scenario: Scenario, iterations: int = 100) -> BenchmarkResult:
    """Search ``scenario`` ``iterations`` times and time every run.

    The grid is built once; paths are discarded apart from the first one,
    which is used for the summary.
    """

    if iterations <= 0:
        raise ValueError("iterations must be positive")

    grid = scenario.build()
    start, goal = scenario.endpoints(grid)
    first = search(grid, start, goal)
    result = BenchmarkResult(
        name=scenario.get_name(),
        iterations=iterations,
        found=first is not None,
        path_length=len(first) if first else 0,
    )
    for _ in range(iterations):
        t0 = time.perf_counter()
        search(grid, start, goal)
        elapsed = time.perf_counter() - t0
        result.durations.append(elapsed)
        record_search(elapsed)

    log_event(
        "benchmark",
        {"scenario": result.name, "iterations": iterations, "mean": result.mean},
    )
    logger.info("Benchmark %s: %s", result.name, result.summary())
    return result


def profile_searches(
    n: int,
    graph: Graph2D[V],
    start: V,
    goal: V,
    out_path: str | Path = "profile.prof",
) -> pstats.Stats:
    """Profile ``n`` searches and dump stats to ``out_path``.

    Parameters
    ----------
    n:
        Number of searches to profile.
    graph, start, goal:
        Arguments forwarded to :func:`~astar2d.search.a_star.search`.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    pstats.Stats
        Profiling statistics for the execution.
    """

    path = Path(out_path)
    profiler = cProfile.Profile()
    profiler.enable()
    last = time.perf_counter()
    for _ in range(n):
        search(graph, start, goal)
        now = time.perf_counter()
        record_search(now - last)
        last = now
    profiler.disable()
    profiler.dump_stats(str(path))
    return pstats.Stats(profiler)


__all__ = ["BenchmarkResult", "benchmark", "profile_searches"]
