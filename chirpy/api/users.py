"""User registration endpoint."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from chirpy.config import Settings, get_settings
from chirpy.database import get_db
from chirpy.exceptions import EmailTakenError, HashingError, ValidationError
from chirpy.schemas.user import UserCreate, UserResponse
from chirpy.services.auth import create_user, get_user_by_email
from chirpy.services.validators import validate_password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


# Plain def: bcrypt is CPU bound, so FastAPI runs this in its threadpool.
@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserCreate,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Register a new user."""
    try:
        validate_password(user_data.password, settings.password_min_length)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e

    if get_user_by_email(db, user_data.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        )

    try:
        user = create_user(db, user_data.email, user_data.password)
    except EmailTakenError as e:
        # Lost a race with a concurrent registration
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        ) from e
    except HashingError as e:
        logger.exception("Password hashing failed during registration")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Something went wrong",
        ) from e

    return user
