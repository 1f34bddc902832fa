from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List, Mapping, Tuple

from ..domain import Event


def display_order(event: Event) -> Tuple[int, str, str]:
    """Sort key: all-day events first, then by time of day, then by id."""

    if event.is_all_day:
        return (0, "", event.id)
    return (1, event.time or "", event.id)


def index_by_date(events: Iterable[Event]) -> Dict[date, List[Event]]:
    """Group ``events`` by calendar date, each day in display order.

    Days without events are absent from the result.
    """

    days_index: Dict[date, List[Event]] = {}
    for event in sorted(events, key=display_order):
        days_index.setdefault(event.date, []).append(event)
    return days_index


def events_on(days_index: Mapping[date, List[Event]], day: date) -> List[Event]:
    return list(days_index.get(day, ()))


def events_between(events: Iterable[Event], start: date, end: date) -> List[Event]:
    """Events dated within ``start``..``end`` inclusive, ordered by date then display order."""

    selected = [event for event in events if start <= event.date <= end]
    return sorted(selected, key=lambda event: (event.date, display_order(event)))
