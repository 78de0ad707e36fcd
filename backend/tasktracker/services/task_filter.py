"""Narrow task collections by date range and employee/project match."""

import logging
from datetime import date, timedelta
from typing import Iterable, List, NamedTuple, Optional

from tasktracker.errors import MalformedDateError
from tasktracker.services.date_range import DateRange, parse_day

logger = logging.getLogger(__name__)

MATCH_FIELDS = {
    "empId": "emp_id",
    "project": "project",
}


class MatchKey(NamedTuple):
    field: str
    value: str


def task_day(task) -> Optional[date]:
    """The day a task is filed under: ``date``, else ``start_date``; ``None`` if unusable."""
    raw = getattr(task, "date", None) or getattr(task, "start_date", None)
    if not raw:
        return None
    try:
        return parse_day(raw)
    except MalformedDateError:
        logger.debug("[tasks] skipping unparseable date %r on task %s", raw, getattr(task, "id", None))
        return None


def matches_key(task, match: MatchKey) -> bool:
    attr = MATCH_FIELDS.get(match.field)
    if attr is None:
        raise ValueError(f"Unsupported match field: {match.field}")
    value = getattr(task, attr, None)
    if value is None:
        return False
    return str(value).strip().casefold() == str(match.value).strip().casefold()


def in_range(day: Optional[date], date_range: Optional[DateRange]) -> bool:
    if date_range is None:
        return True
    if day is None:
        return False
    return date_range.start <= day < date_range.end + timedelta(days=1)


def filter_tasks(
    tasks: Iterable,
    date_range: Optional[DateRange],
    match: Optional[MatchKey] = None,
) -> List:
    result = []
    for task in tasks:
        if match is not None and not matches_key(task, match):
            continue
        if date_range is not None and not in_range(task_day(task), date_range):
            continue
        result.append(task)
    return result
