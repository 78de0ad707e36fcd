"""Run the API with uvicorn using the configured host and port."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import uvicorn

from tasktracker.config import settings


if __name__ == "__main__":
    uvicorn.run(
        "tasktracker.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
