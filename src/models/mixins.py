"""Mixins for SQLAlchemy models."""

from typing import Any

from sqlalchemy import Column, DateTime, func


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamp columns."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class DictMixin:
    """Mixin to expose a row's column values as a plain dict."""

    def to_dict(self) -> dict[str, Any]:
        """Return column values keyed by attribute name."""
        mapper = self.__mapper__  # type: ignore[attr-defined]
        return {attr.key: getattr(self, attr.key) for attr in mapper.column_attrs}
