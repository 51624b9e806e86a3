"""Product repository interface.

Extends ``IRepository[Product]`` with the look-ups required by order
processing: row-level locking and stock decrement (RN-PRO-001).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_for_update(self, id: int) -> Optional[Product]:
        """Retrieve a product with a row-level lock (SELECT FOR UPDATE).

        Used by the order processor so the stock check and the decrement
        see the same row state.  Returns ``None`` if the product does not
        exist.
        """

    @abstractmethod
    def decrement_stock(self, product: Product, quantity: int = 1) -> Product:
        """Remove *quantity* units from ``product.available`` and persist.

        Raises ``InsufficientStock`` instead of going below zero.
        """
