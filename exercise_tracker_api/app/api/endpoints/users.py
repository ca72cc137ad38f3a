"""
User endpoints.

Register users and list them.  Errors are answered as
``{"error": <message>}`` with no internal detail.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from pydantic import ValidationError

from exercise_tracker_api.app.api.deps import (
    SERVER_ERROR,
    error_response,
    get_user_service,
    read_payload,
    validation_message,
)
from exercise_tracker_api.app.schemas.user import UserCreate, UserRead
from exercise_tracker_api.app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=UserRead)
async def create_user(
    payload: dict = Depends(read_payload),
    service: UserService = Depends(get_user_service),
):
    """Register a user, or return the existing user with that name."""
    try:
        data = UserCreate(**payload)
    except ValidationError as exc:
        return error_response(status.HTTP_400_BAD_REQUEST, validation_message(exc))
    try:
        return await service.create_user(data)
    except Exception:
        logger.exception("Failed to create user %s", data.username)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR)


@router.get("", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)):
    """Return all users as ``{username, _id}``."""
    try:
        return await service.list_users()
    except Exception:
        logger.exception("Failed to list users")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR)
