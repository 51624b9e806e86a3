"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.  Reads
eager-load line items and their products so iterating an order costs
a fixed number of queries.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction

from modules.orders.models import Order, OrderItem
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Order]:
        """Retrieve an order with eager-loaded line items and products.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return (
                Order.objects.prefetch_related("items__product")
                .filter(id=id)
                .first()
            )
        except (TypeError, ValueError):
            return None

    def get_line_items(self, order: Order) -> List[OrderItem]:
        """Line items in insertion order (``OrderItem.Meta.ordering``)."""
        return list(order.items.all())

    @transaction.atomic
    def save(self, entity: Order) -> Order:
        """Persist (create or update) an order."""
        entity.save()
        logger.info("order.saved", order_id=entity.id)
        return entity
