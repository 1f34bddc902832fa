from __future__ import annotations

from dataclasses import dataclass

from ..domain import Event

ASSIGNEES_LABEL = "担当"
DESCRIPTION_LABEL = "詳細"


@dataclass(frozen=True, slots=True)
class Chip:
    """Display strings for one event inside a calendar cell.

    ``label`` is the full title; visual truncation is left to the renderer,
    as is escaping for whatever markup the strings end up in.
    """

    event_id: str
    category_id: str
    label: str
    tooltip: str


def tooltip_lines(event: Event) -> list[str]:
    lines = [f"[{event.time}] {event.title}" if event.time else event.title]
    if event.assignees:
        lines.append(f"{ASSIGNEES_LABEL}: {', '.join(event.assignees)}")
    if event.description:
        lines.append(f"{DESCRIPTION_LABEL}: {event.description}")
    return lines


def format_chip(event: Event) -> Chip:
    return Chip(
        event_id=event.id,
        category_id=event.category_id,
        label=event.title,
        tooltip="\n".join(tooltip_lines(event)),
    )
