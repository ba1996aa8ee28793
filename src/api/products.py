"""Product catalog API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_catalog_service, get_current_user
from src.errors import store_guard
from src.schemas.auth import TokenIdentity
from src.schemas.product import (
    CustomProductResponse,
    ProductRegister,
    ProductRegisterResponse,
    ProductResponse,
    SampledProductResponse,
)
from src.services.catalog_service import CatalogService

router = APIRouter(tags=["products"])


@router.get("/products", response_model=list[ProductResponse])
def list_products(
    current_user: Annotated[TokenIdentity, Depends(get_current_user)],
    service: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Get the full product catalog."""
    with store_guard("Failed to fetch products"):
        return service.list_products()


@router.get("/product/{jancode}", response_model=ProductResponse)
def get_product(
    jancode: str,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Get a single product by JAN code."""
    with store_guard("Failed to fetch product"):
        return service.get_product(jancode)


@router.post("/create-product", response_model=ProductRegisterResponse)
def create_product(
    data: ProductRegister,
    current_user: Annotated[TokenIdentity, Depends(get_current_user)],
    service: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Register a scanned code, adding a placeholder product if it is unknown."""
    with store_guard("Failed to create product"):
        product, custom_product = service.register_unknown(
            data.jancode, data.dateline, current_user.username
        )
        return ProductRegisterResponse(
            product=ProductResponse.model_validate(product),
            custom_product=CustomProductResponse.model_validate(custom_product),
        )


@router.get("/custom-products", response_model=list[CustomProductResponse])
def list_custom_products(
    current_user: Annotated[TokenIdentity, Depends(get_current_user)],
    service: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Get the current user's custom product registrations."""
    with store_guard("Failed to fetch custom products"):
        return service.list_custom(current_user.username)


@router.get("/search-checklists", response_model=list[SampledProductResponse])
def search_checklists(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Draw a random set of products for an ad-hoc spot-check."""
    with store_guard("Failed to search checklists"):
        return service.sample_random()
