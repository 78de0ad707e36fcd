"""Subtask normalization and partial-update change sets."""

import pytest

from tasktracker.errors import ValidationError
from tasktracker.schemas.task import TaskCreate, TaskUpdate
from tasktracker.services.subtask_merge import (
    build_task_changes,
    coerce_completion,
    normalize_subtasks,
)


def test_bare_title_is_filled_with_defaults():
    assert normalize_subtasks([{"title": "  Foo  "}]) == [
        {
            "title": "Foo",
            "status": "Pending",
            "completion": 0,
            "remarks": "",
            "start_date": "",
            "due_date": "",
            "end_date": "",
            "time_spent": "",
        }
    ]


def test_camel_case_fields_are_mapped_and_dates_truncated():
    [row] = normalize_subtasks([
        {
            "title": "Build",
            "status": "In Progress",
            "completion": "55",
            "remarks": " halfway ",
            "startDate": "2024-01-02T09:00:00Z",
            "dueDate": "2024-01-09",
            "timeSpent": "3h",
            "unknown": "dropped",
        }
    ])
    assert row["completion"] == 55
    assert row["remarks"] == "halfway"
    assert row["start_date"] == "2024-01-02"
    assert row["due_date"] == "2024-01-09"
    assert row["end_date"] == ""
    assert row["time_spent"] == "3h"
    assert "unknown" not in row


@pytest.mark.parametrize(
    "raw, expected",
    [(None, 0), ("abc", 0), ("", 0), ("40%", 40), (72.5, 72.5), (float("nan"), 0), ([1], 0)],
)
def test_completion_coercion(raw, expected):
    assert coerce_completion(raw) == expected


def test_unknown_status_is_kept_and_order_preserved():
    rows = normalize_subtasks([{"title": "B", "status": "Blocked"}, {"title": "A"}, {"title": "C", "status": ""}])
    assert [r["title"] for r in rows] == ["B", "A", "C"]
    assert [r["status"] for r in rows] == ["Blocked", "Pending", "Pending"]


def test_non_object_subtask_is_rejected_with_index():
    with pytest.raises(ValidationError) as exc:
        normalize_subtasks([{"title": "ok"}, "not an object"])
    assert exc.value.status_code == 400
    assert exc.value.detail["field"] == "subtasks[1]"


def test_partial_update_only_contains_sent_fields():
    changes = build_task_changes(TaskUpdate(status="Completed", dueDate="2024-02-01T00:00:00Z"))
    assert changes == {"status": "Completed", "due_date": "2024-02-01"}


def test_explicit_null_overwrites_scalar():
    changes = build_task_changes(TaskUpdate(remarks=None))
    assert changes == {"remarks": None}


def test_subtasks_in_payload_become_normalized_replacement():
    changes = build_task_changes(TaskUpdate(subtasks=[{"title": "C"}]))
    assert [row["title"] for row in changes["subtasks"]] == ["C"]


def test_blank_emp_id_is_rejected_on_update_and_create():
    with pytest.raises(ValidationError) as exc:
        build_task_changes(TaskUpdate(empId="   "))
    assert exc.value.detail["field"] == "empId"

    with pytest.raises(ValidationError):
        build_task_changes(TaskCreate(project="Alpha"), partial=False)


def test_create_trims_emp_id_and_keeps_status_absent():
    changes = build_task_changes(TaskCreate(empId=" E1 "), partial=False)
    assert changes == {"emp_id": "E1"}
