import pytest

from astar2d.scenarios import GOAL, SCENARIOS, START, PredicateScenario, Scenario, get_scenario
from astar2d.search.a_star import search


def test_builtin_scenarios_registered():
    assert set(SCENARIOS) == {"spikes", "hill", "l_shape"}
    assert all(isinstance(s, Scenario) for s in SCENARIOS.values())
    assert all(s.get_name() == key for key, s in SCENARIOS.items())


@pytest.mark.parametrize("name", ["spikes", "hill", "l_shape"])
def test_scenario_grid_shape_and_endpoints(name):
    scenario = get_scenario(name)
    grid = scenario.build()
    assert (grid.width, grid.height) == (50, 20)
    start, goal = scenario.endpoints(grid)
    assert (start.x, start.y) == START
    assert (goal.x, goal.y) == GOAL
    assert not start.is_wall and not goal.is_wall
    assert search(grid, start, goal) is not None


def test_scenario_walls_match_predicates():
    spikes = get_scenario("spikes").build()
    assert spikes.get_at(3, 10).is_wall
    assert not spikes.get_at(3, 2).is_wall
    assert spikes.get_at(8, 0).is_wall
    hill = get_scenario("hill").build()
    assert hill.get_at(12, 2).is_wall
    assert not hill.get_at(48, 9).is_wall
    l_shape = get_scenario("l_shape").build()
    assert l_shape.get_at(20, 3).is_wall
    assert l_shape.get_at(35, 8).is_wall
    assert not l_shape.get_at(20, 4).is_wall


def test_unknown_scenario():
    with pytest.raises(KeyError) as exc:
        get_scenario("maze")
    assert "spikes" in str(exc.value)


def test_endpoints_off_grid():
    tiny = PredicateScenario("tiny", lambda x, y: False, width=3, height=3)
    with pytest.raises(ValueError):
        tiny.endpoints(tiny.build())
