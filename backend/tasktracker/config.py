"""Environment-driven application settings, managed in one place."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./tasktracker.db"
    DEBUG: bool = False
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]
    LOG_LEVEL: str = "INFO"
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Date filtering
    # IANA zone name used to decide what "today" is; empty means server local date.
    TASK_TIMEZONE: str = ""
    DEFAULT_DATE_PRESET: str = "All"

    # Dashboard rollup
    UNASSIGNED_PROJECT_LABEL: str = "Unassigned"

    class Config:
        # Load backend/.env regardless of the working directory.
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
