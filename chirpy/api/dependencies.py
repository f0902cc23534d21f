"""FastAPI dependencies for services and shared application state."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from chirpy.config import Settings, get_settings
from chirpy.database import get_db
from chirpy.services.chirp_service import ChirpService
from chirpy.services.metrics import HitCounter
from chirpy.services.sanitizer import ProfanityFilter


def get_metrics(request: Request) -> HitCounter:
    """Get the hit counter owned by the running application."""
    return request.app.state.metrics


def get_profanity_filter(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ProfanityFilter:
    """Build the profanity filter from the configured word list."""
    return ProfanityFilter(settings.profane_words)


def get_chirp_service(
    db: Annotated[Session, Depends(get_db)],
    profanity_filter: Annotated[ProfanityFilter, Depends(get_profanity_filter)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ChirpService:
    """Get chirp service with dependencies."""
    return ChirpService(db, profanity_filter, max_length=settings.chirp_max_length)
