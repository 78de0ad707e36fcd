"""Normalize subtask payloads and build column change sets for task writes."""

import logging
import math
from collections.abc import Mapping
from typing import Any, Dict, List, Sequence

from pydantic import BaseModel

from tasktracker.errors import ValidationError
from tasktracker.schemas.task import TaskFields
from tasktracker.services.date_range import truncate_day

logger = logging.getLogger(__name__)

DEFAULT_SUBTASK_STATUS = "Pending"

SUBTASK_DATE_FIELDS = ("start_date", "due_date", "end_date")
TASK_DATE_FIELDS = ("date", "start_date", "due_date", "end_date")

# Wire key -> column name; snake_case keys are accepted as well.
SUBTASK_KEYS = {
    "title": "title",
    "status": "status",
    "completion": "completion",
    "remarks": "remarks",
    "startDate": "start_date",
    "dueDate": "due_date",
    "endDate": "end_date",
    "timeSpent": "time_spent",
}


def coerce_completion(value: Any) -> float:
    """Number-ish input to a float; anything unusable becomes 0."""
    if value is None or isinstance(value, bool):
        return float(value or 0)
    if isinstance(value, str):
        value = value.strip().rstrip("%").strip()
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _subtask_source(item: Any, index: int) -> Dict[str, Any]:
    if isinstance(item, BaseModel):
        item = item.model_dump(by_alias=True)
    if not isinstance(item, Mapping):
        logger.warning("[tasks] rejected subtask at index %s: %r", index, item)
        raise ValidationError(f"subtasks[{index}]", "Each subtask must be an object")
    source = {}
    for key, value in item.items():
        column = SUBTASK_KEYS.get(key, key)
        if column in SUBTASK_KEYS.values():
            source[column] = value
    return source


def normalize_subtask(item: Any, index: int = 0) -> Dict[str, Any]:
    source = _subtask_source(item, index)
    normalized = {
        "title": _text(source.get("title")).strip(),
        "status": _text(source.get("status")) or DEFAULT_SUBTASK_STATUS,
        "completion": coerce_completion(source.get("completion")),
        "remarks": _text(source.get("remarks")).strip(),
        "time_spent": _text(source.get("time_spent")),
    }
    for field in SUBTASK_DATE_FIELDS:
        normalized[field] = truncate_day(source.get(field)) or ""
    return normalized


def normalize_subtasks(items: Sequence[Any]) -> List[Dict[str, Any]]:
    return [normalize_subtask(item, index) for index, item in enumerate(items)]


def build_task_changes(data: TaskFields, partial: bool = True) -> Dict[str, Any]:
    """Column-level changes for a create or partial update.

    Only keys the caller actually sent are included.  ``subtasks`` is present
    only when a list was sent and then holds normalized dicts that replace the
    stored collection.
    """
    sent = data.model_fields_set if partial else set(data.model_fields_set) | {"emp_id"}
    changes: Dict[str, Any] = {}
    for field in sent:
        if field == "subtasks":
            continue
        value = getattr(data, field)
        if field in TASK_DATE_FIELDS:
            value = truncate_day(value)
        changes[field] = value

    if "emp_id" in changes:
        emp_id = (changes["emp_id"] or "").strip()
        if not emp_id:
            logger.warning("[tasks] rejected write with empty empId")
            raise ValidationError("empId", "empId is required")
        changes["emp_id"] = emp_id

    if changes.get("project") is not None:
        changes["project"] = changes["project"].strip()

    if data.subtasks is not None:
        changes["subtasks"] = normalize_subtasks(data.subtasks)
    return changes
