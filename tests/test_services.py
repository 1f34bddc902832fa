from __future__ import annotations

from datetime import date

import pytest

from shared_scheduler.domain import InvalidDateError, UnknownAssigneeError
from shared_scheduler.services import CalendarService, ServiceContext, UserService
from shared_scheduler.storage import LocalFileHandle, encode_document


@pytest.fixture
def handle(settings):
    return LocalFileHandle(settings.storage.document_path)


async def _open(handle, settings):
    context = await ServiceContext.open(handle, settings=settings)
    return context, CalendarService(context), UserService(context)


@pytest.mark.asyncio
async def test_open_on_missing_file_starts_empty(handle, settings):
    context, calendar, users = await _open(handle, settings)

    assert users.list_users() == []
    assert calendar.document.events == ()
    assert context.settings is settings


@pytest.mark.asyncio
async def test_navigation_wraps_years(handle, settings):
    context, calendar, _ = await _open(handle, settings)

    assert calendar.show_month(2026, 1).title == "2026-01"
    assert calendar.show_previous().title == "2025-12"
    assert calendar.show_next().title == "2026-01"
    calendar.show_month(2026, 12)
    assert calendar.show_next().title == "2027-01"
    assert (context.year, context.month) == (2027, 1)
    assert calendar.show_today(today=date(2028, 12, 25)).row_count == 6


@pytest.mark.asyncio
async def test_invalid_month_keeps_current_position(handle, settings):
    context, calendar, _ = await _open(handle, settings)
    calendar.show_month(2026, 2)

    with pytest.raises(InvalidDateError):
        calendar.show_month(2026, 13)

    assert (context.year, context.month) == (2026, 2)
    assert calendar.month_view().row_count == 4


@pytest.mark.asyncio
async def test_created_event_uses_default_category_and_is_saved(handle, settings):
    _, calendar, users = await _open(handle, settings)
    await users.add_user("Ann")

    event = await calendar.create_event(date="2026-02-10", title="Standup", time="09:00", assignees=["Ann"])

    assert event.category_id == "cat_zen"
    assert calendar.events_for_day(date(2026, 2, 10)) == [event]
    _, reopened, _ = await _open(handle, settings)
    assert reopened.get_event(event.id) == event
    chips = [c for cell in reopened.show_month(2026, 2).cells for c in cell.chips]
    assert [chip.tooltip for chip in chips] == ["[09:00] Standup\n担当: Ann"]


@pytest.mark.asyncio
async def test_update_and_delete_event(handle, settings):
    _, calendar, _ = await _open(handle, settings)
    event = await calendar.create_event(date="2026-02-10", title="Standup", time="09:00")

    updated = await calendar.update_event(event.id, title="Retro", time=None, description="Look back")
    assert updated.id == event.id
    assert updated.is_all_day
    assert calendar.get_event(event.id).description == "Look back"

    await calendar.delete_event(event.id)
    assert calendar.get_event(event.id) is None


@pytest.mark.asyncio
async def test_deleting_user_unassigns_events(handle, settings, sample_document):
    settings.storage.document_path.write_bytes(encode_document(sample_document))
    _, calendar, users = await _open(handle, settings)

    assert await users.delete_user("Ann") == ["Test User"]

    assert all("Ann" not in event.assignees for event in calendar.document.events)
    with pytest.raises(UnknownAssigneeError):
        await calendar.create_event(date="2026-01-05", title="x", assignees=["Ann"])
