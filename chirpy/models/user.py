"""User model."""

import uuid

from sqlalchemy import Column, String, Uuid
from sqlalchemy.orm import relationship

from chirpy.database import Base
from chirpy.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and chirp ownership."""

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, nullable=True, index=True)
    hashed_password = Column(String(255), nullable=False)

    # Relationships
    chirps = relationship(
        "Chirp", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
