"""
Exercise endpoints.

Log an exercise for a user and read back the user's exercise log,
optionally bounded by ``from``/``to`` dates and truncated to
``limit`` entries.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import ValidationError

from exercise_tracker_api.app.api.deps import (
    SERVER_ERROR,
    USER_NOT_FOUND,
    error_response,
    get_exercise_service,
    read_payload,
    validation_message,
)
from exercise_tracker_api.app.core.parsing import (
    InvalidFieldError,
    parse_limit,
    parse_optional_date,
)
from exercise_tracker_api.app.schemas.exercise import (
    ExerciseCreate,
    ExerciseLog,
    ExerciseRead,
    LogQuery,
)
from exercise_tracker_api.app.services.exercise_service import ExerciseService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/{user_id}/exercises", response_model=ExerciseRead)
async def add_exercise(
    user_id: str,
    payload: dict = Depends(read_payload),
    service: ExerciseService = Depends(get_exercise_service),
):
    """Log an exercise for the user.

    Body fields: ``description`` and ``duration`` (minutes) are
    required, ``date`` is optional and defaults to today.
    """
    try:
        data = ExerciseCreate(**payload)
    except ValidationError as exc:
        return error_response(status.HTTP_400_BAD_REQUEST, validation_message(exc))
    try:
        exercise = await service.add_exercise(user_id, data)
    except Exception:
        logger.exception("Failed to log exercise for user %s", user_id)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR)
    if exercise is None:
        return error_response(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND)
    return exercise


@router.get("/{user_id}/logs", response_model=ExerciseLog)
async def get_logs(
    user_id: str,
    date_from: Optional[str] = Query(None, alias="from"),
    date_to: Optional[str] = Query(None, alias="to"),
    limit: Optional[str] = Query(None),
    service: ExerciseService = Depends(get_exercise_service),
):
    """Return the user's exercise log, oldest first."""
    try:
        query = LogQuery(
            date_from=parse_optional_date(date_from, "from"),
            date_to=parse_optional_date(date_to, "to"),
            limit=parse_limit(limit),
        )
    except InvalidFieldError as exc:
        return error_response(status.HTTP_400_BAD_REQUEST, exc.message)
    try:
        exercise_log = await service.get_log(user_id, query)
    except Exception:
        logger.exception("Failed to read exercise log for user %s", user_id)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR)
    if exercise_log is None:
        return error_response(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND)
    return exercise_log
