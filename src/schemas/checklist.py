"""Checklist schemas."""

import datetime as dt
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class ChecklistCreate(BaseModel):
    """Create a checklist from scanned product codes."""

    jancodes: list[Annotated[str, Field(min_length=1, max_length=64)]] = Field(..., min_length=1)


class ChecklistDetailResponse(BaseModel):
    """A checklist detail row joined with its product name."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    checklist_id: int
    jancode: str
    dateline: str | None
    datetime: dt.datetime | None
    name: str | None = None


class ChecklistResponse(BaseModel):
    """Checklist with its joined detail rows."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    checklist_id: int
    checklist_name: str
    date_create: dt.date
    status: int
    user: str
    total: int = 0
    details: list[ChecklistDetailResponse] = []


class ChecklistCreateResponse(BaseModel):
    """Created checklist wrapper."""

    success: bool = True
    data: ChecklistResponse


class DetailUpdate(BaseModel):
    """Record a dateline for one product of a checklist.

    ``checklistId`` arrives as either a number or numeric text.
    """

    checklist_id: int | str = Field(..., validation_alias="checklistId")
    jancode: str = Field(..., min_length=1, max_length=64)
    dateline: str = Field(..., min_length=1, max_length=64)
