"""Product model with per-type availability data.

Business rules implemented:
- RN-PRO-001: Available quantity can never be negative.
- RN-PRO-002: Seasonal products carry a season window (start before end).
- RN-PRO-003: Expirable products carry an expiry date.
- RN-PRO-004: ``lead_time`` (days) is informational and may be zero or
  negative; it is only used for delay notifications.
"""

from __future__ import annotations

import structlog

from django.core.exceptions import ValidationError
from django.db import models

from modules.core.models import BaseModel

logger = structlog.get_logger(__name__)


class ProductType(models.TextChoices):
    NORMAL = "NORMAL", "Normal"
    SEASONAL = "SEASONAL", "Seasonal"
    EXPIRABLE = "EXPIRABLE", "Expirable"


class Product(BaseModel):
    """Product aggregate root.

    Type-specific columns are nullable: ``season_start_date`` /
    ``season_end_date`` only matter for ``SEASONAL`` products and
    ``expiry_date`` only for ``EXPIRABLE`` ones.
    """

    name = models.CharField(max_length=255)
    type = models.CharField(max_length=20, choices=ProductType.choices)
    available = models.PositiveIntegerField(default=0)
    lead_time = models.IntegerField(default=0)
    season_start_date = models.DateTimeField(null=True, blank=True, default=None)
    season_end_date = models.DateTimeField(null=True, blank=True, default=None)
    expiry_date = models.DateTimeField(null=True, blank=True, default=None)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["type"], name="products_type_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(available__gte=0),
                name="products_available_non_negative",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.available is not None and self.available < 0:
            raise ValidationError({"available": "Available quantity cannot be negative."})

        if self.type == ProductType.SEASONAL:
            errors = {}
            if self.season_start_date is None:
                errors["season_start_date"] = "Seasonal products require a season start date."
            if self.season_end_date is None:
                errors["season_end_date"] = "Seasonal products require a season end date."
            if errors:
                raise ValidationError(errors)
            if self.season_start_date >= self.season_end_date:
                raise ValidationError(
                    {"season_end_date": "Season end date must be after its start date."}
                )

        if self.type == ProductType.EXPIRABLE and self.expiry_date is None:
            raise ValidationError(
                {"expiry_date": "Expirable products require an expiry date."}
            )

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info(
                "product_created",
                product_id=self.id,
                name=self.name,
                type=self.type,
            )

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.name} ({self.type})"
