from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable, Optional, Tuple

from .errors import InvalidDateError, InvalidTimeError

_TIME_PATTERN = re.compile(r"^(?:[01]\d|2[0-3]):[0-5]\d$")


def parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value, "%Y-%m-%d").date()
        except ValueError as exc:
            raise InvalidDateError(f"Date must be formatted YYYY-MM-DD: {value!r}") from exc
    raise InvalidDateError(f"Unsupported date value: {value!r}")


def parse_time(value: Any) -> Optional[str]:
    """Return a validated ``HH:MM`` string, or ``None`` for an all-day event."""

    if value is None or value == "":
        return None
    if isinstance(value, str) and _TIME_PATTERN.match(value):
        return value
    raise InvalidTimeError(f"Time must be formatted HH:MM: {value!r}")


def unique_names(names: Iterable[str]) -> Tuple[str, ...]:
    seen: set[str] = set()
    ordered: list[str] = []
    for name in names:
        if name in seen:
            continue
        seen.add(name)
        ordered.append(name)
    return tuple(ordered)


@dataclass(frozen=True, slots=True)
class Event:
    """A dated entry on the calendar.

    ``assignees`` is stored on disk as ``writers`` and ``description`` as ``desc``.
    """

    id: str
    date: date
    title: str
    category_id: str
    time: Optional[str] = None
    description: Optional[str] = None
    assignees: Tuple[str, ...] = ()

    @property
    def is_all_day(self) -> bool:
        return not self.time


@dataclass(frozen=True, slots=True)
class Document:
    """Immutable snapshot of every user and event in a schedule file."""

    users: Tuple[str, ...] = ()
    events: Tuple[Event, ...] = ()

    def has_user(self, name: str) -> bool:
        return name in self.users

    def find_event(self, event_id: str) -> Optional[Event]:
        for event in self.events:
            if event.id == event_id:
                return event
        return None

    @property
    def event_ids(self) -> frozenset[str]:
        return frozenset(event.id for event in self.events)
