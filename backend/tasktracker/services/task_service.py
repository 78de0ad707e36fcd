"""Task store service layer: persistence rules for the Task aggregate."""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from tasktracker.errors import NotFoundError
from tasktracker.models.task import Task, Subtask
from tasktracker.schemas.task import TaskCreate, TaskUpdate
from tasktracker.services.date_range import resolve_date_range
from tasktracker.services.subtask_merge import build_task_changes
from tasktracker.services.task_filter import MatchKey, filter_tasks

logger = logging.getLogger(__name__)


def _build_subtasks(rows: List[dict]) -> List[Subtask]:
    return [Subtask(position=index, **row) for index, row in enumerate(rows)]


def _apply_changes(task: Task, changes: dict):
    subtasks = changes.pop("subtasks", None)
    for k, v in changes.items():
        setattr(task, k, v)
    if subtasks is not None:
        # Replacing the list orphans the old rows, which the cascade deletes.
        task.subtasks = _build_subtasks(subtasks)


def create_task(db: Session, data: TaskCreate) -> Task:
    changes = build_task_changes(data, partial=False)
    task = Task()
    _apply_changes(task, changes)
    db.add(task)
    db.commit()
    db.refresh(task)
    logger.info("[tasks] created task id=%s emp_id=%s", task.id, task.emp_id)
    return task


def get_task(db: Session, task_id: str) -> Task:
    task = db.query(Task).filter(Task.id == task_id).first()
    if not task:
        raise NotFoundError(f"Task {task_id} not found")
    return task


def list_tasks(db: Session) -> List[Task]:
    return db.query(Task).order_by(Task.created_at.desc(), Task.id).all()


def _tasks_in_creation_order(db: Session) -> List[Task]:
    return db.query(Task).order_by(Task.created_at, Task.id).all()


def find_by_emp_id(db: Session, emp_id: str) -> List[Task]:
    # Matching is done in Python: SQL lower() only folds ASCII on some engines.
    return filter_tasks(_tasks_in_creation_order(db), None, MatchKey("empId", emp_id))


def find_by_project(db: Session, project: str) -> List[Task]:
    return filter_tasks(_tasks_in_creation_order(db), None, MatchKey("project", project))


def search_tasks(
    db: Session,
    emp_id: Optional[str] = None,
    project: Optional[str] = None,
    preset: Optional[str] = None,
    custom_date: Optional[str] = None,
) -> List[Task]:
    if emp_id:
        tasks = find_by_emp_id(db, emp_id)
    elif project:
        tasks = find_by_project(db, project)
    else:
        tasks = list_tasks(db)
    date_range = resolve_date_range(preset, custom_date)
    return filter_tasks(tasks, date_range)


def update_task(db: Session, task_id: str, data: TaskUpdate) -> Task:
    # Row lock keeps concurrent writers to one task from interleaving.
    task = db.query(Task).filter(Task.id == task_id).with_for_update().first()
    if not task:
        raise NotFoundError(f"Task {task_id} not found")

    changes = build_task_changes(data, partial=True)
    _apply_changes(task, changes)
    # Subtask-only edits leave the task row untouched, so bump the stamp here.
    task.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(task)
    logger.info("[tasks] updated task id=%s fields=%s", task.id, sorted(data.model_fields_set))
    return task


def delete_task(db: Session, task_id: str):
    task = get_task(db, task_id)
    db.delete(task)
    db.commit()
    logger.info("[tasks] deleted task id=%s", task_id)
