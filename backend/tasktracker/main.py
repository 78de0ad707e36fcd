"""FastAPI entry point: registers middleware, logging and API routers."""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from tasktracker.config import settings
from tasktracker.database import Base, engine
import tasktracker.models  # noqa: F401 - registers model metadata
from tasktracker.routers import dashboard, tasks

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Employee Task Tracker",
    description="Task and subtask tracking for employees, managers and team leads",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(tasks.router)
app.include_router(dashboard.router)


@app.on_event("startup")
def ensure_schema():
    Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "Employee Task Tracker"}
