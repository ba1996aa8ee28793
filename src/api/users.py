"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.database import get_db
from src.errors import store_guard
from src.schemas.auth import ModeChange, UserResponse
from src.services.user_service import list_users, toggle_mode

router = APIRouter(tags=["users"])


@router.get("/all-user", response_model=list[UserResponse])
def get_all_users(db: Annotated[Session, Depends(get_db)]):
    """List all users without their passwords."""
    with store_guard("Failed to fetch users"):
        return list_users(db)


@router.post("/change-mode", response_model=UserResponse)
def change_mode(
    data: ModeChange,
    db: Annotated[Session, Depends(get_db)],
):
    """Toggle a user's mode between 0 and 1."""
    with store_guard("Failed to change mode"):
        return toggle_mode(db, data.username)
