"""Chirp API endpoints."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from chirpy.api.dependencies import get_chirp_service
from chirpy.exceptions import UserNotFoundError, ValidationError
from chirpy.schemas.chirp import ChirpCreate, ChirpResponse
from chirpy.services.chirp_service import ChirpService

router = APIRouter(prefix="/api/chirps", tags=["chirps"])


@router.post("", response_model=ChirpResponse, status_code=status.HTTP_201_CREATED)
async def create_chirp(
    chirp_data: ChirpCreate,
    service: Annotated[ChirpService, Depends(get_chirp_service)],
):
    """Post a chirp. Profanity is masked before it is stored."""
    try:
        return service.create_chirp(chirp_data.body, chirp_data.user_id)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found") from e


@router.get("", response_model=list[ChirpResponse])
async def get_chirps(
    service: Annotated[ChirpService, Depends(get_chirp_service)],
):
    """Get all chirps."""
    return service.get_chirps()


@router.get("/{chirp_id}", response_model=ChirpResponse)
async def get_chirp(
    chirp_id: uuid.UUID,
    service: Annotated[ChirpService, Depends(get_chirp_service)],
):
    """Get a single chirp."""
    chirp = service.get_chirp(chirp_id)
    if chirp is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Chirp not found")
    return chirp
