"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from src.config import get_settings
from src.errors import InvalidTokenError
from src.models.user import User
from src.schemas.auth import TokenIdentity

logger = logging.getLogger(__name__)
settings = get_settings()

# Password hashing context. "plaintext" only verifies legacy rows and is
# deprecated, so a successful login re-hashes them with bcrypt.
pwd_context = CryptContext(schemes=["bcrypt", "plaintext"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(
    username: str, mode: int, expires_delta: timedelta | None = None
) -> str:
    """Create a JWT access token carrying the username and mode."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_expiration_minutes)
    expire = datetime.now(UTC) + expires_delta
    to_encode = {
        "username": username,
        "mode": mode,
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str) -> TokenIdentity:
    """Decode and validate a JWT token.

    Raises:
        InvalidTokenError: bad signature, expired, or missing the username claim.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise InvalidTokenError() from e

    username = payload.get("username")
    if not username:
        raise InvalidTokenError()
    return TokenIdentity(username=username, mode=payload.get("mode") or 0)


def authenticate_user(db: Session, username: str, password: str) -> User | None:
    """Authenticate a user by username and password."""
    user = get_user_by_username(db, username)
    if not user:
        return None

    valid, new_hash = pwd_context.verify_and_update(password, user.password_hash)
    if not valid:
        return None
    if new_hash:
        user.password_hash = new_hash
        db.commit()
        db.refresh(user)
        logger.info(f"Upgraded stored password hash for '{username}'")
    return user


def get_user_by_username(db: Session, username: str) -> User | None:
    """Get a user by username."""
    return db.query(User).filter(User.username == username).first()


def create_user(db: Session, username: str, password: str, mode: int = 0) -> User:
    """Create a new user."""
    user = User(username=username, password_hash=get_password_hash(password), mode=mode)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
