"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UserLogin(BaseModel):
    """User login request."""

    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class TokenIdentity(BaseModel):
    """Claims carried by a validated access token."""

    username: str
    mode: int = 0


class UserResponse(BaseModel):
    """User information response (never includes the password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    mode: int


class LoginResponse(UserResponse):
    """Login response: the user record plus its bearer token."""

    token: str
    token_type: str = "bearer"  # noqa: S105


class ModeChange(BaseModel):
    """Toggle a user's mode."""

    username: str = Field(..., min_length=1, max_length=255)
