"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import LoginResponse, ModeChange, TokenIdentity, UserLogin, UserResponse
from src.schemas.checklist import (
    ChecklistCreate,
    ChecklistCreateResponse,
    ChecklistDetailResponse,
    ChecklistResponse,
    DetailUpdate,
)
from src.schemas.product import (
    CustomProductResponse,
    ProductRegister,
    ProductRegisterResponse,
    ProductResponse,
    SampledProductResponse,
)
from src.schemas.settings_ocr import (
    OcrSettingCreate,
    OcrSettingDelete,
    OcrSettingResponse,
    SuccessResponse,
)

__all__ = [
    "UserLogin",
    "TokenIdentity",
    "UserResponse",
    "LoginResponse",
    "ModeChange",
    "ProductResponse",
    "CustomProductResponse",
    "ProductRegister",
    "ProductRegisterResponse",
    "SampledProductResponse",
    "ChecklistCreate",
    "ChecklistCreateResponse",
    "ChecklistDetailResponse",
    "ChecklistResponse",
    "DetailUpdate",
    "OcrSettingCreate",
    "OcrSettingDelete",
    "OcrSettingResponse",
    "SuccessResponse",
]
