"""Tests for the pure document mutations and invariant checks."""

from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from shared_scheduler.domain import (
    Document,
    DuplicateEventError,
    DuplicateUserError,
    EmptyCategoryError,
    EmptyNameError,
    EmptyTitleError,
    InvalidDateError,
    InvalidTimeError,
    UnknownAssigneeError,
    UnknownEventError,
    UnknownUserError,
    add_event,
    add_user,
    delete_event,
    delete_user,
    update_event,
    validate_document,
)


# ------------------------------------------------------------------ users


def test_duplicate_user_is_rejected_and_document_kept():
    once = add_user(Document(), "Ann")

    with pytest.raises(DuplicateUserError):
        add_user(once, "Ann")
    assert once.users == ("Ann",)


def test_user_names_are_case_sensitive():
    doc = add_user(add_user(Document(), "Ann"), "ann")

    assert doc.users == ("Ann", "ann")


def test_blank_user_name_is_rejected():
    with pytest.raises(EmptyNameError):
        add_user(Document(), "   ")


def test_names_with_special_characters_are_kept_verbatim():
    name = 'Jules "The" Engineer'
    doc = add_user(Document(), name)

    assert doc.users == (name,)
    assert delete_user(doc, name).users == ()


def test_deleting_unknown_user_fails():
    with pytest.raises(UnknownUserError):
        delete_user(Document(users=("Ann",)), "Bob")


def test_deleting_user_unassigns_them_from_every_event(sample_document):
    result = delete_user(sample_document, "Ann")

    assert result.users == ("Test User",)
    assert all("Ann" not in event.assignees for event in result.events)
    assert result.find_event("test-event-2").assignees == ("Test User",)
    assert result.find_event("test-event-3").assignees == ()
    validate_document(result)


def test_mutations_do_not_touch_the_input(sample_document):
    before = replace(sample_document)

    delete_user(sample_document, "Ann")
    add_user(sample_document, "Bob")
    delete_event(sample_document, "test-event-1")

    assert sample_document == before


# ------------------------------------------------------------------ events


def test_add_event_appends_with_generated_id(sample_document):
    doc, event = add_event(
        sample_document,
        date="2024-07-29",
        title="Planning",
        time="09:15",
        assignees=["Ann", "Ann", "Test User"],
        category_id="cat_zen",
    )

    assert doc.events[-1] == event
    assert event.date == date(2024, 7, 29)
    assert event.assignees == ("Ann", "Test User")
    assert event.id and event.id not in sample_document.event_ids


def test_generated_ids_are_unique():
    doc = Document()
    ids = set()
    for index in range(50):
        doc, event = add_event(doc, date=date(2024, 7, 1), title=f"Event {index}", category_id="c")
        ids.add(event.id)

    assert len(ids) == 50


@pytest.mark.parametrize(
    ("kwargs", "error"),
    [
        ({"title": "  "}, EmptyTitleError),
        ({"date": "2024-02-30"}, InvalidDateError),
        ({"date": "29/07/2024"}, InvalidDateError),
        ({"time": "24:00"}, InvalidTimeError),
        ({"time": "9:00"}, InvalidTimeError),
        ({"assignees": ["Nobody"]}, UnknownAssigneeError),
        ({"event_id": "test-event-1"}, DuplicateEventError),
        ({"category_id": ""}, EmptyCategoryError),
        ({"category_id": None}, EmptyCategoryError),
    ],
)
def test_add_event_validation(sample_document, kwargs, error):
    arguments = {"date": "2024-07-29", "title": "Planning", "category_id": "cat_zen", **kwargs}

    with pytest.raises(error):
        add_event(sample_document, **arguments)


def test_empty_time_and_description_mean_absent():
    _, event = add_event(Document(), date="2024-07-29", title="x", time="", description="", category_id="c")

    assert event.time is None
    assert event.description is None


def test_update_event_keeps_identifier_and_position(sample_document):
    doc, event = update_event(sample_document, "test-event-1", title="Renamed", time=None)

    assert event.id == "test-event-1"
    assert event.title == "Renamed"
    assert event.time is None
    assert event.description == "This is a test event."
    assert [e.id for e in doc.events] == [e.id for e in sample_document.events]


def test_update_event_validates_changes(sample_document):
    with pytest.raises(UnknownAssigneeError):
        update_event(sample_document, "test-event-1", assignees=["Ghost"])
    with pytest.raises(EmptyTitleError):
        update_event(sample_document, "test-event-1", title="")
    with pytest.raises(UnknownEventError):
        update_event(sample_document, "missing", title="x")


@pytest.mark.parametrize("category_id", ["", "   ", None])
def test_update_event_rejects_blank_category(sample_document, category_id):
    with pytest.raises(EmptyCategoryError):
        update_event(sample_document, "test-event-1", category_id=category_id)


def test_delete_event(sample_document):
    doc = delete_event(sample_document, "test-event-2")

    assert "test-event-2" not in doc.event_ids
    with pytest.raises(UnknownEventError):
        delete_event(doc, "test-event-2")


# ------------------------------------------------------------------ invariants


def test_validate_document_accepts_sample(sample_document):
    validate_document(sample_document)


def test_validate_document_detects_each_invariant(sample_document):
    with pytest.raises(UnknownAssigneeError):
        validate_document(replace(sample_document, users=("Test User",)))
    with pytest.raises(DuplicateEventError):
        validate_document(replace(sample_document, events=sample_document.events + sample_document.events[:1]))
    with pytest.raises(DuplicateUserError):
        validate_document(replace(sample_document, users=sample_document.users + ("Ann",)))


def test_validate_document_requires_a_category(sample_document):
    blank = replace(sample_document.events[0], category_id="")

    with pytest.raises(EmptyCategoryError):
        validate_document(replace(sample_document, events=(blank,)))
