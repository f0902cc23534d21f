"""Errors raised by the credential and chirp validation core.

Routers translate these into HTTP responses: ``ValidationError`` becomes a
400, ``HashingError`` a generic 500. ``VerificationError`` never reaches a
router; :func:`chirpy.services.auth.verify_password` folds it into a failed
match so a corrupt hash looks exactly like a wrong password.
"""

from enum import Enum


class ValidationReason(str, Enum):
    """Why a piece of user input was rejected."""

    TOO_LONG = "too_long"
    TOO_SHORT = "too_short"


class ChirpyError(Exception):
    """Base class for application errors."""


class ValidationError(ChirpyError):
    """User input violates a declared constraint."""

    def __init__(self, reason: ValidationReason, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message


class HashingError(ChirpyError):
    """The password hashing primitive failed."""


class VerificationError(ChirpyError):
    """A stored password hash could not be parsed."""


class EmailTakenError(ChirpyError):
    """Another user already registered this email."""


class UserNotFoundError(ChirpyError):
    """A chirp was posted for a user that does not exist."""
