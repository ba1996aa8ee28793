"""User model."""

from sqlalchemy import Column, Integer, String

from src.database import Base
from src.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """Login record for authentication and checklist ownership."""

    __tablename__ = "login"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), unique=True, nullable=False, index=True)
    # bcrypt hash, or a legacy cleartext value upgraded on next login
    password_hash = Column(String(255), nullable=False)
    mode = Column(Integer, nullable=False, default=0, server_default="0")
