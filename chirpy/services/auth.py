"""Authentication service: password hashing and user credential lookups."""

import logging

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from chirpy.config import get_settings
from chirpy.exceptions import EmailTakenError, HashingError, VerificationError
from chirpy.models.user import User
from chirpy.services.validators import email_or_none

logger = logging.getLogger(__name__)

settings = get_settings()

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72

# Password hashing context; longer passwords are refused instead of truncated
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
    bcrypt__truncate_error=True,
)


def hash_password(password: str) -> str:
    """Hash a password with a fresh salt.

    Raises:
        HashingError: the bcrypt backend failed or rejected the input,
            including passwords longer than 72 bytes.
    """
    try:
        return pwd_context.hash(password)
    except (ValueError, RuntimeError) as e:
        raise HashingError("Could not hash password") from e


def check_hashed_password(password: str, hashed_password: str) -> bool:
    """Check a password against a stored hash.

    Returns False on a mismatch. A password over 72 bytes never matches,
    since no such password can have been hashed.

    Raises:
        VerificationError: the stored hash is malformed.
    """
    if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        return False
    try:
        return pwd_context.verify(password, hashed_password)
    except (ValueError, TypeError) as e:
        raise VerificationError("Stored password hash is malformed") from e


def verify_password(password: str, hashed_password: str) -> bool:
    """Verify a password, treating a corrupt hash as a mismatch."""
    try:
        return check_hashed_password(password, hashed_password)
    except VerificationError:
        logger.warning("Rejecting login against a malformed password hash")
        return False


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email. An empty email never matches."""
    email = email_or_none(email)
    if email is None:
        return None
    return db.query(User).filter(User.email == email).first()


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user


def create_user(db: Session, email: str, password: str) -> User:
    """Create a new user. Only the password hash is stored.

    Raises:
        HashingError: the password could not be hashed.
        EmailTakenError: the email is already registered.
    """
    user = User(email=email_or_none(email), hashed_password=hash_password(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise EmailTakenError("Email already registered") from e
    db.refresh(user)
    logger.info(f"Created user {user.id}")
    return user


def delete_all_users(db: Session) -> int:
    """Delete every user. Their chirps go with them via ON DELETE CASCADE."""
    deleted = db.query(User).delete(synchronize_session=False)
    db.commit()
    logger.info(f"Deleted {deleted} users")
    return deleted
