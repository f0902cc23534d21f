"""Chirp service: validation, sanitizing and storage of chirps."""

import logging
import uuid

from sqlalchemy.orm import Session

from chirpy.exceptions import UserNotFoundError
from chirpy.models.chirp import Chirp
from chirpy.models.user import User
from chirpy.services.sanitizer import ProfanityFilter
from chirpy.services.validators import CHIRP_MAX_LENGTH, validate_chirp_length

logger = logging.getLogger(__name__)


class ChirpService:
    """Service for chirp-related operations."""

    def __init__(
        self,
        db: Session,
        profanity_filter: ProfanityFilter | None = None,
        max_length: int = CHIRP_MAX_LENGTH,
    ):
        self.db = db
        self.profanity_filter = profanity_filter or ProfanityFilter()
        self.max_length = max_length

    def create_chirp(self, body: str, user_id: uuid.UUID) -> Chirp:
        """Validate, sanitize and store a chirp.

        Length is checked on the raw body, before the author is looked up;
        only the sanitized body is stored.

        Raises:
            ValidationError: the body is longer than max_length.
            UserNotFoundError: no user has id user_id.
        """
        validate_chirp_length(body, self.max_length)
        if not self.user_exists(user_id):
            raise UserNotFoundError(f"User {user_id} not found")

        cleaned = self.profanity_filter.sanitize(body)
        if cleaned != body:
            logger.info(f"Masked profanity in chirp from user {user_id}")

        chirp = Chirp(body=cleaned, user_id=user_id)
        self.db.add(chirp)
        self.db.commit()
        self.db.refresh(chirp)
        return chirp

    def get_chirps(self) -> list[Chirp]:
        """Get all chirps, oldest first."""
        return self.db.query(Chirp).order_by(Chirp.created_at.asc(), Chirp.id.asc()).all()

    def get_chirp(self, chirp_id: uuid.UUID) -> Chirp | None:
        """Get a chirp by id."""
        return self.db.query(Chirp).filter(Chirp.id == chirp_id).first()

    def user_exists(self, user_id: uuid.UUID) -> bool:
        return self.db.query(User.id).filter(User.id == user_id).first() is not None
