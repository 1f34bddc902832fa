"""Document model for the scheduler: users, events and the rules binding them."""

from __future__ import annotations

from .document import (
    add_event,
    add_user,
    delete_event,
    delete_user,
    new_event_id,
    update_event,
    validate_document,
)
from .errors import (
    DocumentFormatError,
    DuplicateEventError,
    DuplicateUserError,
    EmptyCategoryError,
    EmptyNameError,
    EmptyTitleError,
    InvalidDateError,
    InvalidTimeError,
    PersistenceError,
    SchedulerError,
    TransactionAbortedError,
    TransactionInProgressError,
    UnknownAssigneeError,
    UnknownEventError,
    UnknownUserError,
    ValidationError,
)
from .models import Document, Event, parse_date, parse_time

__all__ = [
    "Document",
    "DocumentFormatError",
    "DuplicateEventError",
    "DuplicateUserError",
    "EmptyCategoryError",
    "EmptyNameError",
    "EmptyTitleError",
    "Event",
    "InvalidDateError",
    "InvalidTimeError",
    "PersistenceError",
    "SchedulerError",
    "TransactionAbortedError",
    "TransactionInProgressError",
    "UnknownAssigneeError",
    "UnknownEventError",
    "UnknownUserError",
    "ValidationError",
    "add_event",
    "add_user",
    "delete_event",
    "delete_user",
    "new_event_id",
    "parse_date",
    "parse_time",
    "update_event",
    "validate_document",
]
