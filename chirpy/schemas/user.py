"""User and login schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserCreate(BaseModel):
    """User registration request. An empty email registers a user without one."""

    email: str = Field("", max_length=255)
    password: str


class UserLogin(BaseModel):
    """User login request."""

    email: str = Field("", max_length=255)
    password: str


class UserResponse(BaseModel):
    """User information response. Never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    email: str

    @field_validator("email", mode="before")
    @classmethod
    def null_email_as_empty(cls, value: str | None) -> str:
        return value or ""
