from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from tasktracker.database import get_db
from tasktracker.schemas.task import TaskCreate, TaskUpdate, TaskOut
from tasktracker.services import task_service
from tasktracker.services.date_range import effective_preset

router = APIRouter(tags=["tasks"])


@router.get("/api/tasks", response_model=List[TaskOut])
def list_tasks(
    emp_id: Optional[str] = Query(None, alias="empId"),
    project: Optional[str] = None,
    preset: Optional[str] = None,
    custom_date: Optional[str] = Query(None, alias="date"),
    db: Session = Depends(get_db),
):
    if not any((emp_id, project, preset, custom_date)):
        return task_service.list_tasks(db)
    return task_service.search_tasks(
        db,
        emp_id=emp_id,
        project=project,
        preset=effective_preset(preset, custom_date),
        custom_date=custom_date,
    )


@router.post("/api/tasks", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(data: TaskCreate, db: Session = Depends(get_db)):
    return task_service.create_task(db, data)


@router.get("/api/tasks/{task_id}", response_model=TaskOut)
def get_task(task_id: str, db: Session = Depends(get_db)):
    return task_service.get_task(db, task_id)


@router.put("/api/tasks/{task_id}", response_model=TaskOut)
def update_task(task_id: str, data: TaskUpdate, db: Session = Depends(get_db)):
    return task_service.update_task(db, task_id, data)


@router.delete("/api/tasks/{task_id}")
def delete_task(task_id: str, db: Session = Depends(get_db)):
    task_service.delete_task(db, task_id)
    return {"message": "Task deleted"}


@router.get("/api/employees/{emp_id}/tasks", response_model=List[TaskOut])
def list_employee_tasks(emp_id: str, db: Session = Depends(get_db)):
    return task_service.find_by_emp_id(db, emp_id)


@router.get("/api/projects/{project}/tasks", response_model=List[TaskOut])
def list_project_tasks(project: str, db: Session = Depends(get_db)):
    return task_service.find_by_project(db, project)
