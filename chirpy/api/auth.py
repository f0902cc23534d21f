"""Login endpoint. Verifies a password; no token or session is issued."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from chirpy.database import get_db
from chirpy.schemas.user import UserLogin, UserResponse
from chirpy.services.auth import authenticate_user

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=UserResponse)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
        )

    return user
