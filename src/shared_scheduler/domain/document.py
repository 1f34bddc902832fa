"""Pure validation and mutation helpers for :class:`Document` snapshots.

Every helper takes a snapshot and returns a new one; nothing here mutates its
input, so the transaction engine can keep the previous snapshot as its rollback
point without copying.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Callable, Iterable, Optional, Tuple
from uuid import uuid4

from .errors import (
    DuplicateEventError,
    DuplicateUserError,
    EmptyCategoryError,
    EmptyNameError,
    EmptyTitleError,
    UnknownAssigneeError,
    UnknownEventError,
    UnknownUserError,
)
from .models import Document, Event, parse_date, parse_time, unique_names

_UNSET: Any = object()


def new_event_id() -> str:
    return str(uuid4())


# ------------------------------------------------------------------ users


def add_user(doc: Document, name: str) -> Document:
    if not name or not name.strip():
        raise EmptyNameError("User name must not be blank.")
    if doc.has_user(name):
        raise DuplicateUserError(f"User {name!r} already exists.")
    return replace(doc, users=doc.users + (name,))


def delete_user(doc: Document, name: str) -> Document:
    """Remove ``name`` and strip it from every event's assignee list."""

    if not doc.has_user(name):
        raise UnknownUserError(f"User {name!r} does not exist.")
    users = tuple(user for user in doc.users if user != name)
    events = tuple(
        replace(event, assignees=tuple(a for a in event.assignees if a != name))
        if name in event.assignees
        else event
        for event in doc.events
    )
    return Document(users=users, events=events)


# ------------------------------------------------------------------ events


def _check_title(title: Any) -> str:
    if not isinstance(title, str) or not title.strip():
        raise EmptyTitleError("Event title must not be blank.")
    return title


def _check_category(category_id: Any) -> str:
    if not isinstance(category_id, str) or not category_id.strip():
        raise EmptyCategoryError("Event category must not be blank.")
    return category_id


def _check_assignees(doc: Document, assignees: Iterable[str]) -> Tuple[str, ...]:
    names = unique_names(assignees)
    missing = [name for name in names if not doc.has_user(name)]
    if missing:
        raise UnknownAssigneeError(f"Unknown assignee(s): {', '.join(missing)}")
    return names


def _normalize_description(description: Optional[str]) -> Optional[str]:
    return description if description else None


def add_event(
    doc: Document,
    *,
    date: date | str,
    title: str,
    category_id: str,
    time: Optional[str] = None,
    description: Optional[str] = None,
    assignees: Iterable[str] = (),
    event_id: Optional[str] = None,
    id_factory: Callable[[], str] = new_event_id,
) -> Tuple[Document, Event]:
    event = Event(
        id=event_id or id_factory(),
        date=parse_date(date),
        title=_check_title(title),
        time=parse_time(time),
        description=_normalize_description(description),
        assignees=_check_assignees(doc, assignees),
        category_id=_check_category(category_id),
    )
    if doc.find_event(event.id) is not None:
        raise DuplicateEventError(f"Event id {event.id!r} is already in use.")
    return replace(doc, events=doc.events + (event,)), event


def update_event(
    doc: Document,
    event_id: str,
    *,
    date: Any = _UNSET,
    title: Any = _UNSET,
    time: Any = _UNSET,
    description: Any = _UNSET,
    assignees: Any = _UNSET,
    category_id: Any = _UNSET,
) -> Tuple[Document, Event]:
    """Return a snapshot with the given fields of ``event_id`` replaced.

    Fields left unset keep their current value. Passing ``time=None`` or
    ``description=None`` clears the field.
    """

    existing = doc.find_event(event_id)
    if existing is None:
        raise UnknownEventError(f"Event {event_id!r} does not exist.")

    changes: dict[str, Any] = {}
    if title is not _UNSET:
        changes["title"] = _check_title(title)
    if date is not _UNSET:
        changes["date"] = parse_date(date)
    if time is not _UNSET:
        changes["time"] = parse_time(time)
    if description is not _UNSET:
        changes["description"] = _normalize_description(description)
    if assignees is not _UNSET:
        changes["assignees"] = _check_assignees(doc, assignees)
    if category_id is not _UNSET:
        changes["category_id"] = _check_category(category_id)

    updated = replace(existing, **changes)
    events = tuple(updated if event.id == event_id else event for event in doc.events)
    return replace(doc, events=events), updated


def delete_event(doc: Document, event_id: str) -> Document:
    if doc.find_event(event_id) is None:
        raise UnknownEventError(f"Event {event_id!r} does not exist.")
    return replace(doc, events=tuple(event for event in doc.events if event.id != event_id))


# ------------------------------------------------------------------ invariants


def validate_document(doc: Document) -> None:
    """Raise the matching :class:`ValidationError` if ``doc`` breaks an invariant."""

    seen_users: set[str] = set()
    for name in doc.users:
        if not name or not name.strip():
            raise EmptyNameError("User name must not be blank.")
        if name in seen_users:
            raise DuplicateUserError(f"User {name!r} appears more than once.")
        seen_users.add(name)

    seen_ids: set[str] = set()
    for event in doc.events:
        if event.id in seen_ids:
            raise DuplicateEventError(f"Event id {event.id!r} appears more than once.")
        seen_ids.add(event.id)
        _check_title(event.title)
        _check_category(event.category_id)
        parse_date(event.date)
        parse_time(event.time)
        missing = [name for name in event.assignees if name not in seen_users]
        if missing:
            raise UnknownAssigneeError(
                f"Event {event.id!r} references unknown assignee(s): {', '.join(missing)}"
            )
