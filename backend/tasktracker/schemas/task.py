"""Pydantic schemas for task request/response contracts.

Wire keys are camelCase (``empId``, ``startDate``...); attributes stay snake_case.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional
from datetime import date, datetime


CAMEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class TaskFields(BaseModel):
    emp_id: Optional[str] = None
    project: Optional[str] = None
    date: Optional[str] = None
    start_date: Optional[str] = None
    due_date: Optional[str] = None
    end_date: Optional[str] = None
    completion: Optional[float] = None
    status: Optional[str] = None
    remarks: Optional[str] = None
    time_spent: Optional[str] = None
    # Entries are normalized by the subtask merge engine, not by pydantic.
    subtasks: Optional[List[Any]] = None

    model_config = CAMEL_CONFIG


class TaskCreate(TaskFields):
    pass


class TaskUpdate(TaskFields):
    pass


class SubtaskOut(BaseModel):
    title: str = ""
    status: str = "Pending"
    completion: float = 0
    remarks: str = ""
    start_date: str = ""
    due_date: str = ""
    end_date: str = ""
    time_spent: str = ""

    model_config = {**CAMEL_CONFIG, "from_attributes": True}


class TaskOut(BaseModel):
    id: str
    emp_id: str
    project: Optional[str] = None
    date: Optional[str] = None
    start_date: Optional[str] = None
    due_date: Optional[str] = None
    end_date: Optional[str] = None
    completion: Optional[float] = None
    status: Optional[str] = None
    remarks: Optional[str] = None
    time_spent: Optional[str] = None
    subtasks: List[SubtaskOut] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {**CAMEL_CONFIG, "from_attributes": True}


class DateRangeOut(BaseModel):
    preset: str
    start: Optional[date] = None
    end: Optional[date] = None

    model_config = CAMEL_CONFIG


class ProjectStatusOut(BaseModel):
    project: str
    counts: Dict[str, int]

    model_config = {**CAMEL_CONFIG, "from_attributes": True}


class CompletionOut(BaseModel):
    mean: int
    remaining: int
    sample_size: int

    model_config = {**CAMEL_CONFIG, "from_attributes": True}


class TaskRollupOut(BaseModel):
    by_project_status: List[ProjectStatusOut]
    overall_completion: CompletionOut
    subtask_status_distribution: Dict[str, int]
    total_tasks: int
    completed_tasks: int
    total_subtasks: int

    model_config = {**CAMEL_CONFIG, "from_attributes": True}


class DashboardSummaryOut(BaseModel):
    range: DateRangeOut
    rollup: TaskRollupOut

    model_config = CAMEL_CONFIG
