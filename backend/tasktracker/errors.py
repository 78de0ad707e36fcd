"""Task domain errors.

Validation and lookup failures subclass ``HTTPException`` so service code can
raise them directly and FastAPI renders them without extra handlers.
"""

from fastapi import HTTPException, status


class ValidationError(HTTPException):
    def __init__(self, field: str, message: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"field": field, "message": message},
        )
        self.field = field
        self.message = message


class NotFoundError(HTTPException):
    def __init__(self, message: str = "Task not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=message)


class MalformedDateError(ValueError):
    """Raised when a date string cannot be read as a calendar day."""

    def __init__(self, value):
        super().__init__(f"Unparseable date: {value!r}")
        self.value = value
