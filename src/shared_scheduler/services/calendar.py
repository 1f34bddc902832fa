from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Optional

from ..domain import Document, Event, add_event, delete_event, update_event
from ..layout import MonthView, build_month_view, events_on, index_by_date, next_month, previous_month
from .context import ServiceContext


@dataclass(slots=True)
class CalendarService:
    context: ServiceContext

    @property
    def document(self) -> Document:
        return self.context.engine.document

    # ------------------------------------------------------------------ navigation

    def month_view(self) -> MonthView:
        return self._build(self.context.year, self.context.month)

    def show_month(self, year: int, month: int) -> MonthView:
        view = self._build(year, month)
        self.context.year, self.context.month = year, month
        return view

    def _build(self, year: int, month: int) -> MonthView:
        return build_month_view(
            self.document,
            year,
            month,
            row_min_height=self.context.settings.ui.row_min_height,
        )

    def show_previous(self) -> MonthView:
        return self.show_month(*previous_month(self.context.year, self.context.month))

    def show_next(self) -> MonthView:
        return self.show_month(*next_month(self.context.year, self.context.month))

    def show_today(self, *, today: Optional[date] = None) -> MonthView:
        anchor = today or date.today()
        return self.show_month(anchor.year, anchor.month)

    def events_for_day(self, day: date) -> list[Event]:
        return events_on(index_by_date(self.document.events), day)

    def get_event(self, event_id: str) -> Optional[Event]:
        return self.document.find_event(event_id)

    # ------------------------------------------------------------------ mutations

    async def create_event(
        self,
        *,
        date: date | str,
        title: str,
        time: Optional[str] = None,
        description: Optional[str] = None,
        assignees: Iterable[str] = (),
        category_id: Optional[str] = None,
    ) -> Event:
        created: list[Event] = []

        def _add(doc: Document) -> Document:
            updated, event = add_event(
                doc,
                date=date,
                title=title,
                time=time,
                description=description,
                assignees=assignees,
                category_id=category_id or self.context.settings.storage.default_category,
            )
            created.append(event)
            return updated

        await self.context.engine.run_transaction(_add, action=f"add event {title!r}")
        return created[-1]

    async def update_event(self, event_id: str, **changes: Any) -> Event:
        updated_events: list[Event] = []

        def _update(doc: Document) -> Document:
            updated, event = update_event(doc, event_id, **changes)
            updated_events.append(event)
            return updated

        await self.context.engine.run_transaction(_update, action=f"update event {event_id}")
        return updated_events[-1]

    async def delete_event(self, event_id: str) -> None:
        """Callers are expected to have confirmed the deletion with the user."""

        await self.context.engine.run_transaction(
            lambda doc: delete_event(doc, event_id),
            action=f"delete event {event_id}",
        )
