import pytest

from astar2d.utils import observer


def test_record_and_average():
    observer.clear_history()
    assert observer.average_duration() == 0.0
    observer.record_search(0.1)
    observer.record_search(0.3)
    assert observer.average_duration() == pytest.approx(0.2)
    observer.clear_history()
    assert len(observer._search_durations) == 0


def test_history_is_bounded():
    observer.clear_history()
    for _ in range(observer._HISTORY_LEN + 5):
        observer.record_search(0.01)
    assert len(observer._search_durations) == observer._HISTORY_LEN
    observer.clear_history()


def test_log_event_helpers():
    log = []
    observer.log_event("benchmark", {"scenario": "hill", "iterations": 2}, log)
    assert log == [{"type": "benchmark", "scenario": "hill", "iterations": 2}]
    observer._events.clear()
    observer.log_event("benchmark", {"scenario": "spikes"})
    assert observer._events[-1] == {"type": "benchmark", "scenario": "spikes"}
