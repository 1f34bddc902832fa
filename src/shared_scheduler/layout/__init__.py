"""Month grid layout: calendar arithmetic, per-day event ordering and chip text."""

from __future__ import annotations

from .chips import ASSIGNEES_LABEL, DESCRIPTION_LABEL, Chip, format_chip
from .grid import (
    WEEKDAY_LABELS,
    GridDay,
    days_in_month,
    layout_month,
    month_row_count,
    next_month,
    previous_month,
)
from .index import display_order, events_between, events_on, index_by_date
from .view import CalendarCell, MonthView, build_month_view

__all__ = [
    "ASSIGNEES_LABEL",
    "CalendarCell",
    "Chip",
    "DESCRIPTION_LABEL",
    "GridDay",
    "MonthView",
    "WEEKDAY_LABELS",
    "build_month_view",
    "days_in_month",
    "display_order",
    "events_between",
    "events_on",
    "format_chip",
    "index_by_date",
    "layout_month",
    "month_row_count",
    "next_month",
    "previous_month",
]
