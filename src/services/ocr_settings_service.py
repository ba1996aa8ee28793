"""OCR settings service."""

from sqlalchemy.orm import Session

from src.errors import NotFoundError
from src.models.settings_ocr import OcrSetting
from src.services.identifiers import parse_int_id


class OcrSettingsService:
    """Plain CRUD over the OCR settings collection."""

    def __init__(self, db: Session):
        self.db = db

    def list_settings(self) -> list[OcrSetting]:
        return self.db.query(OcrSetting).order_by(OcrSetting.id).all()

    def add_setting(self, value: str) -> OcrSetting:
        setting = OcrSetting(value=value)
        self.db.add(setting)
        self.db.commit()
        self.db.refresh(setting)
        return setting

    def remove_setting(self, setting_id: int | str) -> None:
        """Delete a setting by id.

        Raises:
            ValidationError: the id is not an integer in the Integer range.
            NotFoundError: no setting has this id.
        """
        parsed_id = parse_int_id(setting_id, "id")

        setting = self.db.query(OcrSetting).filter(OcrSetting.id == parsed_id).first()
        if not setting:
            raise NotFoundError("settings_ocr not found")
        self.db.delete(setting)
        self.db.commit()
