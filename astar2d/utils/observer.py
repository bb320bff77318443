"""Runtime observability helpers."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Dict, List

# Rolling history of the last 1000 search durations in seconds
_HISTORY_LEN = 1000
_search_durations: Deque[float] = deque(maxlen=_HISTORY_LEN)

# Global in-memory list for logged events when no destination is supplied
_events: List[Dict[str, Any]] = []


def record_search(duration: float) -> None:
    """Append a search ``duration`` in seconds to the rolling history."""

    _search_durations.append(duration)


def average_duration() -> float:
    """Return the mean recorded duration, or ``0.0`` with no history."""

    if not _search_durations:
        return 0.0
    return sum(_search_durations) / len(_search_durations)


def clear_history() -> None:
    _search_durations.clear()


def log_event(
    event_type: str,
    data: Dict[str, Any],
    log: List[Dict[str, Any]] | None = None,
) -> None:
    """Append an event dict to ``log`` or the internal event buffer."""

    event = {"type": event_type}
    event.update(data)
    if log is None:
        _events.append(event)
    else:
        log.append(event)


__all__ = [
    "record_search",
    "average_duration",
    "clear_history",
    "log_event",
    "_search_durations",
    "_events",
]
