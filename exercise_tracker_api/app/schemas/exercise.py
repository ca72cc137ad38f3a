"""
Pydantic schemas for exercises and exercise logs.

``ExerciseCreate`` normalises the loosely typed request body (form
posts send every value as text) through the helpers in
``core.parsing``.  Response schemas render dates as calendar-date
strings such as ``"Mon Jan 01 2024"``.
"""

from datetime import date as Date
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from exercise_tracker_api.app.core.parsing import (
    InvalidFieldError,
    parse_duration,
    parse_optional_date,
)


class ExerciseCreate(BaseModel):
    """Schema for logging a new exercise.

    ``date`` is optional; when omitted or blank the service uses
    today's date.
    """

    description: str = Field(..., examples=["Morning run"])
    duration: int = Field(..., description="Duration in minutes", examples=[30])
    date: Optional[Date] = Field(None, examples=["2024-01-31"])

    @field_validator("description")
    @classmethod
    def description_present(cls, v: str) -> str:
        if not v.strip():
            raise InvalidFieldError("description", "description is required")
        return v

    @field_validator("duration", mode="before")
    @classmethod
    def coerce_duration(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise InvalidFieldError("duration", "duration is required")
        return parse_duration(v)

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date(cls, v):
        if v is None or isinstance(v, Date):
            return v
        return parse_optional_date(v, "date")


class ExerciseRead(BaseModel):
    """Exercise as returned right after it was logged.

    ``_id`` is the owning user's identifier, not the exercise's.
    """

    id: str = Field(..., alias="_id")
    username: str
    description: str
    duration: int
    date: str

    model_config = {
        "populate_by_name": True,
    }


class LogQuery(BaseModel):
    """Filters for the exercise log, already parsed."""

    date_from: Optional[Date] = None
    date_to: Optional[Date] = None
    limit: Optional[int] = None


class LogEntry(BaseModel):
    description: str
    duration: int
    date: str


class ExerciseLog(BaseModel):
    """A user's exercise log.  ``count`` is the number of entries returned."""

    id: str = Field(..., alias="_id")
    username: str
    count: int
    log: List[LogEntry]

    model_config = {
        "populate_by_name": True,
    }
