"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.errors import MissingTokenError
from src.schemas.auth import TokenIdentity
from src.services.auth import decode_access_token
from src.services.catalog_service import CatalogService
from src.services.checklist_service import ChecklistService
from src.services.ocr_settings_service import OcrSettingsService

# auto_error=False so a missing header becomes our own 401 body
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenIdentity:
    """Get the caller's identity from the bearer token.

    Identity comes from the token claims alone; the user table is not consulted.
    """
    if credentials is None or not credentials.credentials:
        raise MissingTokenError()
    return decode_access_token(credentials.credentials)


def get_catalog_service(
    db: Annotated[Session, Depends(get_db)],
) -> CatalogService:
    """Get catalog service with dependencies."""
    return CatalogService(db)


def get_checklist_service(
    db: Annotated[Session, Depends(get_db)],
) -> ChecklistService:
    """Get checklist service with dependencies."""
    return ChecklistService(db)


def get_ocr_settings_service(
    db: Annotated[Session, Depends(get_db)],
) -> OcrSettingsService:
    """Get OCR settings service with dependencies."""
    return OcrSettingsService(db)
