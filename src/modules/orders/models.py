"""Order and OrderItem models.

Business rules implemented:
- RN-PED-001: Orders and line items are created upstream; processing
  only reads them.
- RN-PED-002: Each line item requests exactly one unit of one product
  (no quantity column).
- RN-PED-003: Line items are processed in insertion order (``id``).
- Product FK uses PROTECT: a product referenced by an order cannot be
  removed.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Order(BaseModel):
    """Order aggregate root.

    ``created_at`` is the ordered-at timestamp.  Products are reached
    through ``items`` (``OrderItem``).
    """

    products: models.ManyToManyField = models.ManyToManyField(
        "products.Product",
        through="orders.OrderItem",
        related_name="orders",
    )

    class Meta:
        db_table = "orders"
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return f"Order #{self.pk}"


class OrderItem(BaseModel):
    """Line item linking an Order to one unit of a Product."""

    order: models.ForeignKey = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="items",
    )
    product: models.ForeignKey = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="order_items",
    )

    class Meta:
        db_table = "order_items"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.order} -> {self.product}"
