"""
Top-level API router.

Aggregates the endpoint routers under a common prefix.  Both routers
share the ``/users`` prefix: user registration lives at the prefix
itself, exercise routes hang off ``/users/{user_id}``.
"""

from fastapi import APIRouter

from .endpoints import exercises, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(exercises.router, prefix="/users", tags=["exercises"])
