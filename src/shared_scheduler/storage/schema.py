from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain import Document, Event, parse_date, parse_time
from ..domain.models import unique_names


class EventRecord(BaseModel):
    """On-disk shape of an event. Field order is the serialized key order."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    date: str
    time: Optional[str] = Field(default=None)
    title: str
    desc: Optional[str] = Field(default=None)
    writers: List[str] = Field(default_factory=list)
    category_id: Optional[str] = Field(default=None, alias="categoryId")

    @classmethod
    def from_domain(cls, event: Event) -> "EventRecord":
        return cls(
            id=event.id,
            date=event.date.isoformat(),
            time=event.time,
            title=event.title,
            desc=event.description,
            writers=list(event.assignees),
            category_id=event.category_id,
        )

    def to_domain(self, *, default_category: str) -> Event:
        return Event(
            id=self.id,
            date=parse_date(self.date),
            title=self.title,
            time=parse_time(self.time),
            description=self.desc or None,
            assignees=unique_names(self.writers),
            category_id=self.category_id or default_category,
        )


class DocumentRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    users: List[str] = Field(default_factory=list)
    events: List[EventRecord] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, document: Document) -> "DocumentRecord":
        return cls(
            users=list(document.users),
            events=[EventRecord.from_domain(event) for event in document.events],
        )

    def to_domain(self, *, default_category: str) -> Document:
        return Document(
            users=tuple(self.users),
            events=tuple(event.to_domain(default_category=default_category) for event in self.events),
        )
