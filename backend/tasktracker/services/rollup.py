"""Dashboard rollups over an already-filtered task collection."""

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from tasktracker.config import settings

STATUS_COMPLETED = "Completed"
STATUS_IN_PROGRESS = "In Progress"
STATUS_PENDING = "Pending"
CANONICAL_STATUSES = (STATUS_COMPLETED, STATUS_IN_PROGRESS, STATUS_PENDING)


def empty_counts() -> Dict[str, int]:
    return {status: 0 for status in CANONICAL_STATUSES}


@dataclass
class ProjectStatus:
    project: str
    counts: Dict[str, int]


@dataclass
class CompletionSummary:
    mean: int = 0
    remaining: int = 0
    sample_size: int = 0


@dataclass
class TaskRollup:
    by_project_status: List[ProjectStatus] = field(default_factory=list)
    overall_completion: CompletionSummary = field(default_factory=CompletionSummary)
    subtask_status_distribution: Dict[str, int] = field(default_factory=empty_counts)
    total_tasks: int = 0
    completed_tasks: int = 0
    total_subtasks: int = 0


def bucket_status(status: Optional[str]) -> str:
    if status in CANONICAL_STATUSES:
        return status
    return STATUS_PENDING


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def parse_completion(value) -> Optional[float]:
    """Completion as a number, or ``None`` when it should not count toward the mean."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.replace("%", "").strip()
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def summarize_completion(values: Iterable) -> CompletionSummary:
    parsed = [number for number in (parse_completion(v) for v in values) if number is not None]
    if not parsed:
        return CompletionSummary()
    mean = sum(parsed) / len(parsed)
    return CompletionSummary(
        mean=round_half_up(mean),
        remaining=max(round_half_up(100 - mean), 0),
        sample_size=len(parsed),
    )


def compute_rollup(tasks: Iterable) -> TaskRollup:
    tasks = list(tasks)
    if not tasks:
        return TaskRollup()

    projects: Dict[str, Dict[str, int]] = {}
    subtask_counts = empty_counts()
    total_subtasks = 0
    for task in tasks:
        project = (getattr(task, "project", None) or "").strip() or settings.UNASSIGNED_PROJECT_LABEL
        counts = projects.setdefault(project, empty_counts())
        counts[bucket_status(getattr(task, "status", None))] += 1

        for subtask in getattr(task, "subtasks", None) or []:
            subtask_counts[bucket_status(getattr(subtask, "status", None))] += 1
            total_subtasks += 1

    completion = summarize_completion(getattr(task, "completion", None) for task in tasks)
    if completion.sample_size == 0:
        # Nothing measurable yet: the whole chart is "remaining".
        completion.remaining = 100

    return TaskRollup(
        by_project_status=[ProjectStatus(project=name, counts=counts) for name, counts in projects.items()],
        overall_completion=completion,
        subtask_status_distribution=subtask_counts,
        total_tasks=len(tasks),
        completed_tasks=sum(1 for task in tasks if getattr(task, "status", None) == STATUS_COMPLETED),
        total_subtasks=total_subtasks,
    )
