"""SQLAlchemy models."""

from src.models.checklist import Checklist, ChecklistDetail
from src.models.product import CustomProduct, Product
from src.models.settings_ocr import OcrSetting
from src.models.user import User

__all__ = [
    "User",
    "Product",
    "CustomProduct",
    "Checklist",
    "ChecklistDetail",
    "OcrSetting",
]
