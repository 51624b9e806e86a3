"""Order repository interface.

Extends ``IRepository[Order]`` with the read used by order processing:
an order together with its line items and their products.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order, OrderItem


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[Order]:
        """Retrieve an order with prefetched items and products."""

    @abstractmethod
    def get_line_items(self, order: Order) -> List[OrderItem]:
        """Return the order's line items in processing order."""
