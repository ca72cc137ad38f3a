"""
Pydantic models for user data.

Users carry nothing but a username; the identifier is generated by the
store and exposed on the wire as ``_id``.
"""

from pydantic import BaseModel, Field, field_validator

from exercise_tracker_api.app.core.parsing import InvalidFieldError


class UserCreate(BaseModel):
    """Schema for registering a user."""

    username: str = Field(..., examples=["fcc_test"])

    @field_validator("username")
    @classmethod
    def username_present(cls, v: str) -> str:
        if not v.strip():
            raise InvalidFieldError("username", "username is required")
        return v


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str = Field(..., alias="_id")
    username: str

    model_config = {
        "populate_by_name": True,
    }
