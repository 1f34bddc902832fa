from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Tuple

from ..domain import Document, Event
from .chips import Chip, format_chip
from .grid import DAYS_PER_WEEK, layout_month
from .index import events_on, index_by_date


@dataclass(frozen=True, slots=True)
class CalendarCell:
    date: date
    in_month: bool
    events: Tuple[Event, ...] = ()
    chips: Tuple[Chip, ...] = ()

    @property
    def is_other_month(self) -> bool:
        return not self.in_month


@dataclass(frozen=True, slots=True)
class MonthView:
    """Everything a renderer needs to draw one month."""

    year: int
    month: int
    cells: Tuple[CalendarCell, ...]
    row_min_height: int

    @property
    def row_count(self) -> int:
        return len(self.cells) // DAYS_PER_WEEK

    @property
    def rows(self) -> list[Tuple[CalendarCell, ...]]:
        return [
            self.cells[start : start + DAYS_PER_WEEK]
            for start in range(0, len(self.cells), DAYS_PER_WEEK)
        ]

    @property
    def grid_template_rows(self) -> str:
        return f"repeat({self.row_count}, minmax({self.row_min_height}px, auto))"

    @property
    def title(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


def build_cells(year: int, month: int, events: Iterable[Event]) -> Tuple[CalendarCell, ...]:
    days_index = index_by_date(events)
    cells = []
    for day, in_month in layout_month(year, month):
        day_events = tuple(events_on(days_index, day))
        cells.append(
            CalendarCell(
                date=day,
                in_month=in_month,
                events=day_events,
                chips=tuple(format_chip(event) for event in day_events),
            )
        )
    return tuple(cells)


def build_month_view(document: Document, year: int, month: int, *, row_min_height: int = 120) -> MonthView:
    return MonthView(
        year=year,
        month=month,
        cells=build_cells(year, month, document.events),
        row_min_height=row_min_height,
    )
