"""User listing and mode toggling."""

import logging

from sqlalchemy.orm import Session

from src.errors import NotFoundError
from src.models.user import User
from src.services.auth import get_user_by_username

logger = logging.getLogger(__name__)


def list_users(db: Session) -> list[User]:
    """Get all users in storage order."""
    return db.query(User).order_by(User.id).all()


def toggle_mode(db: Session, username: str) -> User:
    """Flip a user's mode between 0 and 1.

    Any mode other than 1 is treated as 0, so the toggle always lands on 0 or 1.
    """
    user = get_user_by_username(db, username)
    if not user:
        raise NotFoundError("User not found")

    user.mode = 0 if user.mode == 1 else 1
    db.commit()
    db.refresh(user)
    logger.info(f"User '{username}' switched to mode {user.mode}")
    return user
