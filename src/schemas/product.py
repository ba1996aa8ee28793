"""Product schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ProductResponse(BaseModel):
    """Catalog product."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    jancode: str
    name: str
    dateline: str | None
    date_discount: int
    date_recall: int


class CustomProductResponse(ProductResponse):
    """A user's registration of a scanned code."""

    user: str


class ProductRegister(BaseModel):
    """Register a scanned code that may be missing from the catalog."""

    jancode: str = Field(..., min_length=1, max_length=64)
    dateline: str = Field(..., min_length=1, max_length=64)


class ProductRegisterResponse(BaseModel):
    """Result of registering a scanned code."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    product: ProductResponse
    custom_product: CustomProductResponse = Field(..., alias="customProduct")


class SampledProductResponse(ProductResponse):
    """Randomly drawn product with empty inspection fields."""

    dateline: str | None = None
    datetime: str | None = None
