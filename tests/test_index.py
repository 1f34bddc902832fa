"""Tests for grouping and ordering events per day."""

from __future__ import annotations

from datetime import date

from shared_scheduler.domain import Event
from shared_scheduler.layout import display_order, events_between, events_on, index_by_date
from shared_scheduler.storage import decode_document


def _event(event_id: str, day: date, time=None, title="Event") -> Event:
    return Event(id=event_id, date=day, time=time, title=title, category_id="cat_zen")


def test_groups_by_date_and_omits_empty_days():
    monday, tuesday = date(2024, 7, 29), date(2024, 7, 30)
    index = index_by_date([_event("a", monday), _event("b", tuesday), _event("c", monday, "09:00")])

    assert set(index) == {monday, tuesday}
    assert [event.id for event in index[monday]] == ["a", "c"]
    assert date(2024, 7, 31) not in index


def test_all_day_events_come_before_timed_events():
    day = date(2024, 7, 29)
    index = index_by_date(
        [
            _event("late", day, "14:00"),
            _event("all-day", day),
            _event("early", day, "08:30"),
        ]
    )

    assert [event.id for event in index[day]] == ["all-day", "early", "late"]


def test_ties_are_broken_by_identifier():
    day = date(2024, 7, 29)
    forward = index_by_date([_event("b", day, "10:00"), _event("a", day, "10:00"), _event("d", day), _event("c", day)])
    backward = index_by_date([_event("c", day), _event("d", day), _event("a", day, "10:00"), _event("b", day, "10:00")])

    assert [event.id for event in forward[day]] == ["c", "d", "a", "b"]
    assert forward == backward


def test_many_events_on_one_day_keep_time_order():
    day = date(2024, 7, 29)
    events = [_event(str(hour), day, f"{hour:02d}:00", f"Event {hour}") for hour in (14, 10, 12, 13, 11)]

    titles = [event.title for event in index_by_date(events)[day]]

    assert titles == ["Event 10", "Event 11", "Event 12", "Event 13", "Event 14"]


def test_empty_input_gives_empty_index():
    assert index_by_date([]) == {}


def test_events_on_treats_missing_day_as_no_events():
    index = index_by_date([_event("a", date(2024, 7, 29))])

    assert events_on(index, date(2024, 7, 1)) == []
    assert [event.id for event in events_on(index, date(2024, 7, 29))] == ["a"]


def test_events_between_is_inclusive_and_ordered():
    events = [
        _event("after", date(2024, 8, 1)),
        _event("last-day", date(2024, 7, 31), "09:00"),
        _event("first-day", date(2024, 7, 1)),
        _event("before", date(2024, 6, 30)),
    ]

    selected = events_between(events, date(2024, 7, 1), date(2024, 7, 31))

    assert [event.id for event in selected] == ["first-day", "last-day"]


def test_blank_time_from_file_sorts_as_all_day():
    raw = (
        b'{"users": [], "events": ['
        b'{"id": "a", "date": "2024-07-29", "time": "08:00", "title": "Early"},'
        b'{"id": "b", "date": "2024-07-29", "time": "", "title": "Untimed"}'
        b"]}"
    )
    document = decode_document(raw, default_category="cat_zen")
    untimed = document.find_event("b")

    assert untimed.time is None
    assert untimed.is_all_day
    assert display_order(untimed)[0] == 0
    assert [event.id for event in index_by_date(document.events)[date(2024, 7, 29)]] == ["b", "a"]
