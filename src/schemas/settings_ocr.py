"""OCR settings schemas."""

from pydantic import BaseModel, ConfigDict, Field


class OcrSettingCreate(BaseModel):
    """Add an OCR setting value."""

    value: str = Field(..., min_length=1)


class OcrSettingDelete(BaseModel):
    """Remove an OCR setting by id (number or numeric text)."""

    id: int | str


class OcrSettingResponse(BaseModel):
    """OCR setting value."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    value: str


class SuccessResponse(BaseModel):
    """Acknowledgement body."""

    success: bool = True
