from __future__ import annotations

import uuid

import pytest

from models import Task


def test_new_task_is_pending_with_unique_id() -> None:
    first = Task(title="buy milk")
    second = Task(title="buy milk")

    assert first.is_completed is False
    assert isinstance(first.id, uuid.UUID)
    assert first.id != second.id


def test_display_form_uses_status_glyph() -> None:
    task = Task(title="walk dog")
    assert str(task) == "❌ walk dog"

    task.is_completed = True
    assert str(task) == "✅ walk dog"


def test_empty_title_is_accepted() -> None:
    assert str(Task(title="")) == "❌ "


def test_id_cannot_be_reassigned() -> None:
    task = Task(title="x")
    with pytest.raises(AttributeError):
        task.id = uuid.uuid4()


def test_record_keeps_id_title_and_flag() -> None:
    task = Task(title="pay rent", is_completed=True)

    record = task.to_dict()

    assert record == {"id": str(task.id), "title": "pay rent", "isCompleted": True}
    assert Task.from_dict(record) == task


def test_from_dict_reads_records_written_by_older_files() -> None:
    raw = {"id": "E621E1F8-C36C-495A-93FC-0C247A3E6E5F", "title": "legacy", "isCompleted": False}

    task = Task.from_dict(raw)

    assert task.id == uuid.UUID("e621e1f8-c36c-495a-93fc-0c247a3e6e5f")
    assert task.title == "legacy"


@pytest.mark.parametrize(
    "raw, error",
    [
        ({"title": "no id", "isCompleted": False}, KeyError),
        ({"id": "not-a-uuid", "title": "t", "isCompleted": False}, ValueError),
        ({"id": str(uuid.uuid4()), "title": 3, "isCompleted": False}, TypeError),
        ({"id": str(uuid.uuid4()), "title": "t", "isCompleted": "yes"}, TypeError),
    ],
)
def test_from_dict_rejects_malformed_records(raw, error) -> None:
    with pytest.raises(error):
        Task.from_dict(raw)
