"""Checklist API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_checklist_service, get_current_user
from src.errors import store_guard
from src.schemas.auth import TokenIdentity
from src.schemas.checklist import (
    ChecklistCreate,
    ChecklistCreateResponse,
    ChecklistResponse,
    DetailUpdate,
)
from src.schemas.settings_ocr import SuccessResponse
from src.services.checklist_service import ChecklistService

router = APIRouter(tags=["checklists"])


@router.get("/checklists", response_model=list[ChecklistResponse])
def list_checklists(
    current_user: Annotated[TokenIdentity, Depends(get_current_user)],
    service: Annotated[ChecklistService, Depends(get_checklist_service)],
):
    """Get the current user's checklists, newest first, with named details."""
    with store_guard("Failed to fetch checklists"):
        return service.list_checklists(current_user.username)


@router.post("/create-checklist", response_model=ChecklistCreateResponse)
def create_checklist(
    data: ChecklistCreate,
    current_user: Annotated[TokenIdentity, Depends(get_current_user)],
    service: Annotated[ChecklistService, Depends(get_checklist_service)],
):
    """Create a checklist with one detail row per JAN code."""
    with store_guard("Failed to create checklist"):
        checklist = service.create_checklist(current_user.username, data.jancodes)
    return ChecklistCreateResponse(data=checklist)


@router.post("/update-product", response_model=SuccessResponse)
def update_product(
    data: DetailUpdate,
    current_user: Annotated[TokenIdentity, Depends(get_current_user)],
    service: Annotated[ChecklistService, Depends(get_checklist_service)],
):
    """Record a product's dateline within a checklist."""
    with store_guard("Failed to update product"):
        service.update_detail(data.checklist_id, data.jancode, data.dateline)
    return SuccessResponse()
