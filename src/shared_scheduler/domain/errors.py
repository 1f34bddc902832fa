"""Error taxonomy shared by the document model, the engine and its callers."""

from __future__ import annotations


class SchedulerError(RuntimeError):
    """Base class for every error raised by the scheduler core."""


class ValidationError(SchedulerError):
    """Raised before any write when a mutation would produce an invalid document."""


class DuplicateUserError(ValidationError):
    """Raised when a user name is already present in the document."""


class UnknownUserError(ValidationError):
    """Raised when a user name is not present in the document."""


class EmptyNameError(ValidationError):
    """Raised when a user name is blank."""


class UnknownAssigneeError(ValidationError):
    """Raised when an event references a user that does not exist."""


class InvalidDateError(ValidationError):
    """Raised for malformed dates or months outside the representable calendar."""


class InvalidTimeError(ValidationError):
    """Raised when a time-of-day is not a valid ``HH:MM`` string."""


class EmptyTitleError(ValidationError):
    """Raised when an event title is blank."""


class EmptyCategoryError(ValidationError):
    """Raised when an event has no category tag."""


class DuplicateEventError(ValidationError):
    """Raised when an event identifier is already taken or was retired this session."""


class UnknownEventError(ValidationError):
    """Raised when an event identifier does not exist in the document."""


class PersistenceError(SchedulerError):
    """Raised when the backing store rejects a write."""


class DocumentFormatError(PersistenceError):
    """Raised when the backing store holds content that cannot be loaded."""


class TransactionInProgressError(SchedulerError):
    """Raised when a transaction is started while another one is pending."""


class TransactionAbortedError(SchedulerError):
    """Raised when a mutation fails for a reason other than validation."""
