"""Chirp schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ChirpCreate(BaseModel):
    """Create a chirp. Length is checked by the service, not here."""

    body: str
    user_id: uuid.UUID


class ChirpResponse(BaseModel):
    """Chirp response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    body: str
    user_id: uuid.UUID
