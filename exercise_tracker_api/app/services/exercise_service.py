"""
Service layer for exercises and exercise logs.

Exercises are stored with an ISO ``YYYY-MM-DD`` date, which keeps
range filters and ordering correct with plain string comparison in
SQLite.  Responses render the date as a calendar-date string.
"""

import logging
import sqlite3
from datetime import date
from typing import Optional

from exercise_tracker_api.app.core.db import Store
from exercise_tracker_api.app.core.parsing import format_calendar_date
from exercise_tracker_api.app.schemas.exercise import (
    ExerciseCreate,
    ExerciseLog,
    ExerciseRead,
    LogEntry,
    LogQuery,
)

logger = logging.getLogger(__name__)


def _iso(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


class ExerciseService:
    """Service class for logging and querying exercises."""

    def __init__(self, store: Store) -> None:
        self.store = store

    @staticmethod
    def _row_to_log_entry(row: sqlite3.Row) -> LogEntry:
        return LogEntry(
            description=row["description"],
            duration=row["duration"],
            date=format_calendar_date(date.fromisoformat(row["date"])),
        )

    async def add_exercise(self, user_id: str, data: ExerciseCreate) -> Optional[ExerciseRead]:
        """Log an exercise for ``user_id``.

        Returns ``None`` without writing anything if the user does not
        exist.  A missing date defaults to today.
        """
        user = self.store.find_user_by_id(user_id)
        if not user:
            return None
        exercise_date = data.date or date.today()
        row = self.store.insert_exercise(
            user_id=user["id"],
            description=data.description,
            duration=data.duration,
            date=exercise_date.isoformat(),
        )
        logger.info("Logged exercise %s for user %s", row["id"], user["id"])
        entry = self._row_to_log_entry(row)
        return ExerciseRead(
            id=user["id"],
            username=user["username"],
            description=entry.description,
            duration=entry.duration,
            date=entry.date,
        )

    async def get_log(self, user_id: str, query: LogQuery) -> Optional[ExerciseLog]:
        """Return the user's exercises within ``query``, oldest first.

        Returns ``None`` if the user does not exist.
        """
        user = self.store.find_user_by_id(user_id)
        if not user:
            return None
        rows = self.store.find_exercises(
            user["id"],
            date_from=_iso(query.date_from),
            date_to=_iso(query.date_to),
            limit=query.limit,
        )
        log = [self._row_to_log_entry(row) for row in rows]
        return ExerciseLog(id=user["id"], username=user["username"], count=len(log), log=log)
