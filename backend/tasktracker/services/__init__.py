"""Service layer package."""

from tasktracker.services import (
    date_range,
    task_filter,
    subtask_merge,
    rollup,
    task_service,
)
