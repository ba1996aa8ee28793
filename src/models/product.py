"""Product catalog models."""

from sqlalchemy import Column, Integer, String

from src.database import Base
from src.models.mixins import DictMixin, TimestampMixin

DEFAULT_DISCOUNT_DAYS = 60
DEFAULT_RECALL_DAYS = 40


class Product(Base, TimestampMixin, DictMixin):
    """Catalog entry keyed by JAN code."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    jancode = Column(String(64), unique=True, nullable=False, index=True)
    name = Column(String(500), nullable=False)
    dateline = Column(String(64), nullable=True)
    date_discount = Column(Integer, nullable=False, default=DEFAULT_DISCOUNT_DAYS)
    date_recall = Column(Integer, nullable=False, default=DEFAULT_RECALL_DAYS)


class CustomProduct(Base, TimestampMixin, DictMixin):
    """Audit row recording that a user registered a scanned code.

    Duplicates are expected: every registration appends a row, even for codes
    already present in the catalog.
    """

    __tablename__ = "custom_products"

    id = Column(Integer, primary_key=True, index=True)
    jancode = Column(String(64), nullable=False, index=True)
    name = Column(String(500), nullable=False)
    dateline = Column(String(64), nullable=True)
    date_discount = Column(Integer, nullable=False, default=DEFAULT_DISCOUNT_DAYS)
    date_recall = Column(Integer, nullable=False, default=DEFAULT_RECALL_DAYS)
    user = Column(String(255), nullable=False, index=True)  # registrant username
