"""Checklist models."""

from sqlalchemy import Column, Date, DateTime, Integer, String

from src.database import Base
from src.models.mixins import DictMixin, TimestampMixin


class Checklist(Base, TimestampMixin, DictMixin):
    """A dated batch of products a user must inspect.

    ``checklist_id`` is the public identifier. It is assigned as max + 1 and is
    deliberately not unique at the storage level.
    """

    __tablename__ = "checklists"

    id = Column(Integer, primary_key=True)
    checklist_id = Column(Integer, nullable=False, index=True)
    checklist_name = Column(String(255), nullable=False)
    date_create = Column(Date, nullable=False, index=True)
    status = Column(Integer, nullable=False, default=0)
    user = Column(String(255), nullable=False, index=True)  # owner username


class ChecklistDetail(Base, DictMixin):
    """One product's status within a checklist."""

    __tablename__ = "checklist_detail"

    id = Column(Integer, primary_key=True)
    checklist_id = Column(Integer, nullable=False, index=True)
    jancode = Column(String(64), nullable=False, index=True)
    dateline = Column(String(64), nullable=True)
    datetime = Column(DateTime(timezone=True), nullable=True)  # last update
