"""Chirp model."""

import uuid

from sqlalchemy import Column, ForeignKey, Text, Uuid
from sqlalchemy.orm import relationship

from chirpy.database import Base
from chirpy.models.mixins import TimestampMixin


class Chirp(Base, TimestampMixin):
    """A short post written by a user. Body is stored already sanitized."""

    __tablename__ = "chirps"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    body = Column(Text, nullable=False)
    user_id = Column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    user = relationship("User", back_populates="chirps")
