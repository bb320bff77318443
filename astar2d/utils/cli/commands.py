"""Implementations of CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict
import logging

from ...config import CONFIG, Config
from ...scenarios import SCENARIOS, Scenario, get_scenario
from ...search.a_star import run_search
from ..observer import average_duration
from ..png_export import draw_grid_png
from ..profiling import benchmark, profile_searches
from .terminal_view import get_view

logger = logging.getLogger(__name__)


HELP_TEXT = """Available commands:
  /help                          show this message
  /scenarios                     list the built-in maps
  /show [name]                   search a map and print the path
  /colour                        toggle ANSI colours for /show
  /bench [name|all] [n]          time n searches of a map
  /profile [name] [n] [out]      cProfile n searches, dump stats to out
  /png [name] [out]              save the map and path as a PNG
  /quit                          exit"""


def _config(state: Dict[str, Any]) -> Config:
    return state.get("config") or CONFIG


def _fail(state: Dict[str, Any], msg: str, *args: Any) -> None:
    """Log ``msg`` as an error and flag the command as failed in ``state``."""
    logger.error(msg, *args)
    state["failed"] = True


def _scenario(name: str | None, state: Dict[str, Any]) -> Scenario | None:
    key = name or _config(state).demo.scenario
    try:
        return get_scenario(key)
    except KeyError as e:
        _fail(state, "%s", e.args[0])
        return None


def _positive_int(
    text: str | None, default: int, what: str, state: Dict[str, Any]
) -> int | None:
    if text is None:
        return default
    try:
        value = int(text)
    except ValueError:
        _fail(state, "Invalid %s: %s", what, text)
        return None
    if value <= 0:
        _fail(state, "%s must be positive.", what.capitalize())
        return None
    return value


def help_command(state: Dict[str, Any]) -> None:
    print(HELP_TEXT)


def list_scenarios(state: Dict[str, Any]) -> list[str]:
    names = sorted(SCENARIOS)
    for name in names:
        print(name)
    return names


def colour(state: Dict[str, Any]) -> bool:
    enabled = get_view().toggle_colour()
    logger.info("Colour output %s.", "enabled" if enabled else "disabled")
    return enabled


def show(name: str | None, state: Dict[str, Any]) -> Any:
    scenario = _scenario(name, state)
    if scenario is None:
        return None
    grid = scenario.build()
    start, goal = scenario.endpoints(grid)
    result = run_search(grid, start, goal)
    get_view().render(grid, result.path, start, goal)
    if result.path is None:
        logger.info("No path found on %s.", scenario.get_name())
    else:
        logger.info(
            "Path on %s: %s cells, %s expanded.",
            scenario.get_name(),
            len(result.path),
            result.expanded,
        )
    return result


def bench(name: str | None, iterations_str: str | None, state: Dict[str, Any]) -> Any:
    iterations = _positive_int(
        iterations_str, _config(state).benchmark.iterations, "number of iterations", state
    )
    if iterations is None:
        return None
    if name == "all":
        scenarios = [SCENARIOS[key] for key in sorted(SCENARIOS)]
    else:
        scenario = _scenario(name, state)
        if scenario is None:
            return None
        scenarios = [scenario]
    results = []
    for scenario in scenarios:
        result = benchmark(scenario, iterations)
        print(result.summary())
        results.append(result)
    print(f"rolling average over recent searches: {average_duration() * 1000:.3f} ms")
    return results


def profile(
    name: str | None, n_str: str | None, out: str | None, state: Dict[str, Any]
) -> Any:
    cfg = _config(state)
    scenario = _scenario(name, state)
    n = _positive_int(n_str, cfg.benchmark.iterations, "number of searches", state)
    if scenario is None or n is None:
        return None
    out_path = Path(out) if out else Path(cfg.benchmark.profile_out)
    grid = scenario.build()
    start, goal = scenario.endpoints(grid)
    logger.info("Profiling %s searches of %s. Output to %s", n, scenario.get_name(), out_path)
    try:
        stats = profile_searches(n, grid, start, goal, out_path)
    except OSError as e:
        _fail(state, "Error writing profile: %s", e)
        return None
    logger.info("Profiling complete. Stats saved to %s", out_path)
    return stats


def png(name: str | None, out: str | None, state: Dict[str, Any]) -> Any:
    cfg = _config(state)
    scenario = _scenario(name, state)
    if scenario is None:
        return None
    grid = scenario.build()
    start, goal = scenario.endpoints(grid)
    result = run_search(grid, start, goal)
    try:
        out_path = draw_grid_png(
            grid, result.path, start, goal, out or cfg.demo.png_out, cfg.demo.png_cell
        )
    except (OSError, ValueError) as e:
        _fail(state, "Error writing PNG: %s", e)
        return None
    logger.info("Wrote %s", out_path)
    return out_path


def execute(command: str, args: list[str], state: Dict[str, Any]) -> Any:
    if "running" not in state:
        state["running"] = True
    state["failed"] = False
    cmd_lower = command.lower()

    def arg(i: int) -> str | None:
        return args[i] if len(args) > i else None

    return_value: Any = None

    if cmd_lower == "help":
        help_command(state)
    elif cmd_lower == "scenarios":
        return_value = list_scenarios(state)
    elif cmd_lower == "show":
        return_value = show(arg(0), state)
    elif cmd_lower == "colour":
        return_value = colour(state)
    elif cmd_lower == "bench":
        return_value = bench(arg(0), arg(1), state)
    elif cmd_lower == "profile":
        return_value = profile(arg(0), arg(1), arg(2), state)
    elif cmd_lower == "png":
        return_value = png(arg(0), arg(1), state)
    elif cmd_lower == "quit":
        state["running"] = False
        logger.info("Quit command received. Shutting down...")
    else:
        _fail(state, "Unknown command: /%s. Type /help for available commands.", command)

    return return_value


__all__ = ["execute", "HELP_TEXT"]
