"""
Shared dependencies for API endpoints.

The store is created by ``create_app`` and attached to
``app.state.store``; services are built per request around it.
Request bodies may be JSON or form encoded, so endpoints read them
through ``read_payload`` instead of declaring body parameters.
"""

from typing import Any, Dict

from fastapi import Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from exercise_tracker_api.app.core.db import Store
from exercise_tracker_api.app.core.parsing import InvalidFieldError
from exercise_tracker_api.app.services.exercise_service import ExerciseService
from exercise_tracker_api.app.services.user_service import UserService

SERVER_ERROR = "Server error"
USER_NOT_FOUND = "User not found"


def get_store(request: Request) -> Store:
    return request.app.state.store


def get_user_service(store: Store = Depends(get_store)) -> UserService:
    return UserService(store)


def get_exercise_service(store: Store = Depends(get_store)) -> ExerciseService:
    return ExerciseService(store)


async def read_payload(request: Request) -> Dict[str, Any]:
    """Return the request body as a dict.

    JSON bodies are used as-is when they decode to an object; anything
    else is parsed as urlencoded or multipart form data.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}
    form = await request.form()
    return {key: value for key, value in form.items()}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def validation_message(exc: ValidationError) -> str:
    """Turn the first error of a ``ValidationError`` into a client message."""
    error = exc.errors()[0]
    field = error["loc"][0] if error.get("loc") else "body"
    if error["type"] == "missing":
        return f"{field} is required"
    cause = (error.get("ctx") or {}).get("error")
    if isinstance(cause, InvalidFieldError):
        return cause.message
    if isinstance(cause, ValueError) and str(cause):
        return str(cause)
    return f"{field} is invalid"
