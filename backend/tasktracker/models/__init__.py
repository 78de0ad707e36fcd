"""SQLAlchemy model package."""

from tasktracker.models.task import Task, Subtask

__all__ = [
    "Task", "Subtask",
]
