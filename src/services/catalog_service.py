"""Catalog service: products, custom registrations and random spot-checks."""

import logging
import random
from typing import Any

from sqlalchemy.orm import Session

from src.config import get_settings
from src.errors import NotFoundError
from src.models.product import DEFAULT_DISCOUNT_DAYS, DEFAULT_RECALL_DAYS, CustomProduct, Product

logger = logging.getLogger(__name__)

# Placeholder name for codes registered without a product master record
NO_MASTER_NAME = "商品マスタなし"


class CatalogService:
    """Service for catalog-related operations."""

    def __init__(self, db: Session, rng: random.Random | None = None):
        self.db = db
        self.rng = rng or random.Random()

    def list_products(self) -> list[Product]:
        """Get every product in storage order.

        Full scan without paging; the catalog is assumed to stay small.
        """
        return self.db.query(Product).order_by(Product.id).all()

    def get_product(self, jancode: str) -> Product:
        """Get a product by JAN code."""
        product = self.db.query(Product).filter(Product.jancode == jancode).first()
        if not product:
            raise NotFoundError("Product not found")
        return product

    def register_unknown(
        self, jancode: str, dateline: str, registrant: str
    ) -> tuple[Product, CustomProduct]:
        """Register a scanned code on behalf of ``registrant``.

        Inserts a placeholder product when the code is not in the catalog, and
        always appends a custom-product row carrying the supplied dateline,
        even when the catalog already knew the code. An existing product is
        left untouched.
        """
        product = self.db.query(Product).filter(Product.jancode == jancode).first()
        if not product:
            product = Product(
                jancode=jancode,
                name=NO_MASTER_NAME,
                dateline=dateline,
                date_discount=DEFAULT_DISCOUNT_DAYS,
                date_recall=DEFAULT_RECALL_DAYS,
            )
            self.db.add(product)
            logger.info(f"Added placeholder product {jancode} registered by '{registrant}'")

        custom_product = CustomProduct(
            jancode=jancode,
            name=NO_MASTER_NAME,
            dateline=dateline,
            date_discount=DEFAULT_DISCOUNT_DAYS,
            date_recall=DEFAULT_RECALL_DAYS,
            user=registrant,
        )
        self.db.add(custom_product)
        self.db.commit()
        self.db.refresh(product)
        self.db.refresh(custom_product)
        return product, custom_product

    def list_custom(self, owner: str) -> list[CustomProduct]:
        """Get the custom-product registrations made by ``owner``."""
        return (
            self.db.query(CustomProduct)
            .filter(CustomProduct.user == owner)
            .order_by(CustomProduct.id)
            .all()
        )

    def sample_random(
        self, min_count: int | None = None, max_count: int | None = None
    ) -> list[dict[str, Any]]:
        """Draw a random spot-check of distinct products.

        Picks a count uniformly in [min_count, max_count], clamped to the
        catalog size, then that many distinct storage positions without
        replacement. Existing checklists are not consulted.
        """
        settings = get_settings()
        if min_count is None:
            min_count = settings.sample_min_count
        if max_count is None:
            max_count = settings.sample_max_count

        total = self.db.query(Product).count()
        wanted = min(self.rng.randint(min_count, max_count), total)
        offsets = self.rng.sample(range(total), wanted)

        sampled = []
        for offset in offsets:
            product = self.db.query(Product).order_by(Product.id).offset(offset).limit(1).first()
            if product:
                sampled.append({**product.to_dict(), "dateline": None, "datetime": None})
        return sampled
