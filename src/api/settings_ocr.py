"""OCR settings API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_ocr_settings_service
from src.errors import store_guard
from src.schemas.settings_ocr import (
    OcrSettingCreate,
    OcrSettingDelete,
    OcrSettingResponse,
    SuccessResponse,
)
from src.services.ocr_settings_service import OcrSettingsService

router = APIRouter(tags=["settings-ocr"])


@router.get("/settings-ocr", response_model=list[OcrSettingResponse])
def list_settings(
    service: Annotated[OcrSettingsService, Depends(get_ocr_settings_service)],
):
    """List OCR settings."""
    with store_guard("Failed to fetch settings_ocr"):
        return service.list_settings()


@router.post("/settings-ocr", response_model=OcrSettingResponse)
def add_setting(
    data: OcrSettingCreate,
    service: Annotated[OcrSettingsService, Depends(get_ocr_settings_service)],
):
    """Add an OCR setting value."""
    with store_guard("Failed to insert settings_ocr"):
        return service.add_setting(data.value)


@router.post("/delete-settings-ocr", response_model=SuccessResponse)
def delete_setting(
    data: OcrSettingDelete,
    service: Annotated[OcrSettingsService, Depends(get_ocr_settings_service)],
):
    """Delete an OCR setting by id."""
    with store_guard("Failed to delete settings_ocr"):
        service.remove_setting(data.id)
    return SuccessResponse()
