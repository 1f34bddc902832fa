"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

import asyncio
from datetime import date
from pathlib import Path
from typing import List, Optional

import pytest

from shared_scheduler.config import AppSettings, LoggingSettings, StorageSettings, UiSettings
from shared_scheduler.domain import Document, Event


class MemoryStore:
    """In-memory backing store with switchable failures."""

    def __init__(self, content: bytes = b"") -> None:
        self.content = content
        self.writes: List[bytes] = []
        self.fail_with: Optional[BaseException] = None
        self.reject = False
        self.gate: Optional[asyncio.Event] = None

    async def read(self) -> bytes:
        return self.content

    async def write(self, payload: bytes) -> bool:
        if self.gate is not None:
            await self.gate.wait()
        if self.fail_with is not None:
            raise self.fail_with
        if self.reject:
            return False
        self.content = payload
        self.writes.append(payload)
        return True


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    return AppSettings(
        storage=StorageSettings(document_path=tmp_path / "schedule.json", default_category="cat_zen"),
        ui=UiSettings(app_name="Shared Scheduler", row_min_height=120),
        logging=LoggingSettings(level="DEBUG", directory=tmp_path / "logs"),
    )


@pytest.fixture
def sample_event() -> Event:
    """The event used throughout the tooltip checks."""
    return Event(
        id="test-event-1",
        date=date(2026, 1, 1),
        time="10:00",
        title="Test Event",
        description="This is a test event.",
        assignees=("Test User",),
        category_id="cat_zen",
    )


@pytest.fixture
def sample_document(sample_event: Event) -> Document:
    return Document(
        users=("Test User", "Ann"),
        events=(
            sample_event,
            Event(
                id="test-event-2",
                date=date(2026, 1, 1),
                title="All day retreat",
                assignees=("Ann", "Test User"),
                category_id="cat_zen",
            ),
            Event(
                id="test-event-3",
                date=date(2025, 12, 30),
                time="18:30",
                title="Year-end dinner",
                assignees=("Ann",),
                category_id="cat_party",
            ),
        ),
    )
