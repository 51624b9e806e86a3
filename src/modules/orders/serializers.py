"""Order DRF serializers for API output.

The serializer operates at the Interface layer (API Views).
Business logic lives in the Service Layer.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.models import Order, OrderItem
from modules.products.serializers import ProductSerializer


class OrderItemSerializer(serializers.ModelSerializer):
    product = ProductSerializer(read_only=True)

    class Meta:
        model = OrderItem
        fields = ["id", "product"]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Order detail with its line items and their products."""

    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = ["id", "created_at", "items"]
        read_only_fields = fields


class ProcessOrderResponseSerializer(serializers.Serializer):
    """Schema of the ``processOrder`` confirmation payload."""

    orderId = serializers.IntegerField()  # noqa: N815
