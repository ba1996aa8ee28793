"""OCR settings model."""

from sqlalchemy import Column, Integer, String

from src.database import Base
from src.models.mixins import TimestampMixin


class OcrSetting(Base, TimestampMixin):
    """Free-form OCR configuration value."""

    __tablename__ = "settings_ocr"

    id = Column(Integer, primary_key=True, index=True)
    value = Column(String, nullable=False)
