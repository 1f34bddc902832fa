"""Transactional persistence for the schedule document.

A transaction applies a pure mutation to the committed snapshot, validates the
result, writes it to the backing store and only then adopts it. Any failure
along the way leaves both the committed snapshot and the store as they were.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from ..config.settings import DEFAULT_CATEGORY_ID
from ..domain import (
    Document,
    DuplicateEventError,
    PersistenceError,
    TransactionAbortedError,
    TransactionInProgressError,
    ValidationError,
    validate_document,
)
from .codec import EMPTY_DOCUMENT, decode_document, encode_document
from .stores import BackingStore

logger = logging.getLogger(__name__)

Mutation = Callable[[Document], Document]


class TransactionEngine:
    """Owns the committed document and the store it is persisted to."""

    def __init__(
        self,
        store: BackingStore,
        document: Document = EMPTY_DOCUMENT,
        *,
        default_category: str = DEFAULT_CATEGORY_ID,
    ) -> None:
        self._store = store
        self._committed = document
        self._retired_ids: set[str] = set()
        self._gate = threading.Lock()
        self.default_category = default_category

    @classmethod
    async def open(cls, store: BackingStore, *, default_category: str = DEFAULT_CATEGORY_ID) -> "TransactionEngine":
        try:
            raw = await store.read()
        except Exception as exc:  # noqa: BLE001
            raise PersistenceError(f"Could not read schedule file: {exc}") from exc
        document = decode_document(raw, default_category=default_category)
        logger.info("Loaded schedule with %d users and %d events", len(document.users), len(document.events))
        return cls(store, document, default_category=default_category)

    @property
    def document(self) -> Document:
        return self._committed

    @property
    def store(self) -> BackingStore:
        return self._store

    @property
    def in_flight(self) -> bool:
        return self._gate.locked()

    async def run_transaction(self, mutation: Mutation, *, action: str = "transaction") -> Document:
        """Apply ``mutation`` and persist the result, or change nothing.

        Raises :class:`TransactionInProgressError` straight away if another
        transaction has not finished yet.
        """

        if not self._gate.acquire(blocking=False):
            raise TransactionInProgressError(f"Cannot start {action}: another transaction is pending.")
        try:
            return await self._apply(mutation, action)
        finally:
            self._gate.release()

    async def _apply(self, mutation: Mutation, action: str) -> Document:
        base = self._committed
        candidate = self._prepare(mutation, base, action)
        if candidate == base:
            logger.debug("%s left the document unchanged; nothing to write", action)
            return base

        try:
            payload = encode_document(candidate)
        except Exception as exc:  # noqa: BLE001
            raise TransactionAbortedError(f"{action} produced a document that cannot be encoded.") from exc

        try:
            acknowledged = await self._store.write(payload)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Write failed during %s; keeping last committed document", action)
            raise PersistenceError(f"Could not save changes ({action}): {exc}") from exc
        if acknowledged is False:
            logger.warning("Store rejected write during %s; keeping last committed document", action)
            raise PersistenceError(f"Could not save changes ({action}): write was rejected.")

        self._retired_ids |= base.event_ids - candidate.event_ids
        self._committed = candidate
        logger.info(
            "Committed %s (%d users, %d events)", action, len(candidate.users), len(candidate.events)
        )
        return candidate

    def _prepare(self, mutation: Mutation, base: Document, action: str) -> Document:
        try:
            candidate = mutation(base)
            if not isinstance(candidate, Document):
                raise TypeError(f"mutation returned {type(candidate).__name__}, not Document")
            validate_document(candidate)
            self._check_retired_ids(candidate, base)
        except ValidationError as exc:
            logger.warning("Rolled back %s: %s", action, exc)
            raise
        except Exception as exc:  # noqa: BLE001
            logger.exception("Rolled back %s after an unexpected error", action)
            raise TransactionAbortedError(f"{action} failed: {exc}") from exc
        return candidate

    def _check_retired_ids(self, candidate: Document, base: Document) -> None:
        revived = (candidate.event_ids - base.event_ids) & self._retired_ids
        if revived:
            raise DuplicateEventError(f"Event id(s) already used this session: {', '.join(sorted(revived))}")

