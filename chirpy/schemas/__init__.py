"""Pydantic schemas for API requests and responses."""

from chirpy.schemas.chirp import ChirpCreate, ChirpResponse
from chirpy.schemas.user import UserCreate, UserLogin, UserResponse

__all__ = [
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "ChirpCreate",
    "ChirpResponse",
]
