"""Request validation rules applied before anything is persisted."""

from chirpy.exceptions import ValidationError, ValidationReason

CHIRP_MAX_LENGTH = 140


def validate_chirp_length(body: str, max_length: int = CHIRP_MAX_LENGTH) -> None:
    """Reject chirp bodies longer than max_length characters.

    Runs on the raw body, before sanitizing.
    """
    if len(body) > max_length:
        raise ValidationError(ValidationReason.TOO_LONG, "Chirp is too long")


def validate_password(password: str, min_length: int = 0) -> None:
    """Enforce the minimum password length. A min_length of 0 disables it."""
    if min_length and len(password) < min_length:
        raise ValidationError(
            ValidationReason.TOO_SHORT,
            f"Password must be at least {min_length} characters",
        )


def email_or_none(email: str | None) -> str | None:
    """Treat an empty email as absent. No format checks are made."""
    return email or None
