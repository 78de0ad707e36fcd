"""Dashboard rollup and date-range API router."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tasktracker.database import get_db
from tasktracker.schemas.task import DashboardSummaryOut, DateRangeOut
from tasktracker.services import task_service
from tasktracker.services.date_range import canonical_preset, effective_preset, resolve_date_range
from tasktracker.services.rollup import compute_rollup

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


def _range_out(preset: str, custom_date: Optional[str]) -> DateRangeOut:
    date_range = resolve_date_range(preset, custom_date)
    if date_range is None:
        return DateRangeOut(preset=canonical_preset(preset))
    return DateRangeOut(preset=canonical_preset(preset), start=date_range.start, end=date_range.end)


@router.get("/date-range", response_model=DateRangeOut)
def get_date_range(
    preset: Optional[str] = None,
    custom_date: Optional[str] = Query(None, alias="date"),
):
    return _range_out(effective_preset(preset, custom_date), custom_date)


@router.get("/summary", response_model=DashboardSummaryOut)
def get_summary(
    emp_id: Optional[str] = Query(None, alias="empId"),
    project: Optional[str] = None,
    preset: Optional[str] = None,
    custom_date: Optional[str] = Query(None, alias="date"),
    db: Session = Depends(get_db),
):
    preset = effective_preset(preset, custom_date)
    tasks = task_service.search_tasks(db, emp_id=emp_id, project=project, preset=preset, custom_date=custom_date)
    return {
        "range": _range_out(preset, custom_date),
        "rollup": compute_rollup(tasks),
    }
