"""Product DRF serializers for API output.

Products are embedded read-only in order payloads; this module owns
their wire representation.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read-only serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "type",
            "available",
            "lead_time",
            "season_start_date",
            "season_end_date",
            "expiry_date",
        ]
        read_only_fields = fields
