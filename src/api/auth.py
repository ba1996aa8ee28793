"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.database import get_db
from src.errors import AuthError, store_guard
from src.schemas.auth import LoginResponse, UserLogin, UserResponse
from src.services.auth import authenticate_user, create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with username and password."""
    with store_guard("Login failed"):
        user = authenticate_user(db, credentials.username, credentials.password)

    if not user:
        logger.warning(f"Rejected login for '{credentials.username}'")
        raise AuthError("Invalid username or password")

    token = create_access_token(user.username, user.mode)
    return LoginResponse(**UserResponse.model_validate(user).model_dump(), token=token)
