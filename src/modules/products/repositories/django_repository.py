"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Look-ups follow the Null Object pattern: they return ``None`` instead
of raising, and the Service Layer decides how to translate a missing
entity into an API response.
"""

from __future__ import annotations

from typing import Optional

import structlog

from django.db import transaction

from modules.products.exceptions import InsufficientStock
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key, ``None`` when absent."""
        return Product.objects.filter(id=id).first()

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info("product.saved", product_id=entity.id, type=entity.type)
        return entity

    def get_for_update(self, id: int) -> Optional[Product]:
        """Retrieve a product with a row-level lock.

        Must run inside a transaction: the lock is held until the
        caller's ``transaction.atomic`` block ends.
        """
        return Product.objects.select_for_update().filter(id=id).first()

    @transaction.atomic
    def decrement_stock(self, product: Product, quantity: int = 1) -> Product:
        """Deduct *quantity* units, writing only ``available``."""
        if product.available < quantity:
            raise InsufficientStock(
                f"Product {product.id}: requested {quantity}, "
                f"available {product.available}."
            )
        product.available -= quantity
        product.save(update_fields=["available", "updated_at"])
        logger.info(
            "product.stock_decremented",
            product_id=product.id,
            quantity=quantity,
            remaining=product.available,
        )
        return product
