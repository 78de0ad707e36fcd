"""SQLAlchemy models for the Task aggregate and its embedded subtasks."""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import Column, Integer, Float, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from tasktracker.database import Base


def _new_task_id() -> str:
    return uuid4().hex


class Task(Base):
    __tablename__ = "tasks"

    id = Column(String(32), primary_key=True, default=_new_task_id)
    emp_id = Column(String(50), nullable=False)
    project = Column(String(200))
    # Calendar days kept as YYYY-MM-DD text; time suffixes are cut off before storage.
    date = Column(String(32))
    start_date = Column(String(32))
    due_date = Column(String(32))
    end_date = Column(String(32))
    completion = Column(Float)
    status = Column(String(30))
    remarks = Column(Text)
    time_spent = Column(String(100))
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    subtasks = relationship(
        "Subtask",
        back_populates="task",
        cascade="all, delete-orphan",
        order_by="Subtask.position",
    )

    __table_args__ = (
        Index("idx_task_emp_id", "emp_id"),
        Index("idx_task_project", "project"),
    )


class Subtask(Base):
    __tablename__ = "subtasks"

    subtask_id = Column(Integer, primary_key=True, autoincrement=True)
    task_id = Column(String(32), ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    title = Column(String(300), nullable=False, default="")
    status = Column(String(30), nullable=False, default="Pending")
    completion = Column(Float, nullable=False, default=0)
    remarks = Column(Text, nullable=False, default="")
    start_date = Column(String(32), nullable=False, default="")
    due_date = Column(String(32), nullable=False, default="")
    end_date = Column(String(32), nullable=False, default="")
    time_spent = Column(String(100), nullable=False, default="")

    task = relationship("Task", back_populates="subtasks")

    __table_args__ = (
        Index("idx_subtask_task", "task_id", "position"),
    )
