"""Create the schema and seed the database with sample tasks."""
import argparse
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import date, timedelta
from tasktracker.database import SessionLocal, engine, Base
import tasktracker.models  # noqa: F401

from tasktracker.models.task import Task
from tasktracker.schemas.task import TaskCreate
from tasktracker.services import task_service


def seed(schema_only: bool = False):
    Base.metadata.create_all(bind=engine)
    if schema_only:
        print("Database tables created.")
        return
    db = SessionLocal()
    try:
        if db.query(Task).count() > 0:
            print("Database already seeded. Skipping.")
            return

        today = date.today()
        samples = [
            {
                "empId": "E1001", "project": "Alpha", "date": str(today),
                "completion": 40, "status": "In Progress", "remarks": "API layer",
                "subtasks": [
                    {"title": "Design", "status": "Completed", "completion": 100},
                    {"title": "Build", "status": "In Progress", "completion": 30},
                ],
            },
            {
                "empId": "E1001", "project": "Alpha", "date": str(today - timedelta(days=3)),
                "completion": 100, "status": "Completed", "timeSpent": "6h",
            },
            {
                "empId": "E1002", "project": "Beta", "startDate": str(today - timedelta(days=20)),
                "completion": 10, "status": "Pending",
                "subtasks": [{"title": "Requirements"}],
            },
            {"empId": "E1003", "date": str(today - timedelta(days=200)), "status": "In Progress"},
        ]
        for payload in samples:
            task_service.create_task(db, TaskCreate(**payload))

        print(f"Seeded {len(samples)} tasks.")
    finally:
        db.close()


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--schema-only", action="store_true", help="Create tables without inserting sample tasks")
    args = parser.parse_args()
    seed(schema_only=args.schema_only)


if __name__ == "__main__":
    main()
