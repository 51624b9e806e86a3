"""Unit tests for the Product model.

Covers:
- Creation with defaults and timestamps.
- Type-specific validation in ``clean`` (season window, expiry date).
- Non-negative available quantity (DB constraint).
- ``updated_at`` refreshed on partial saves.
- __str__ representation.
"""

from __future__ import annotations

from datetime import timedelta

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.utils import timezone

from modules.products.models import Product, ProductType

pytestmark = pytest.mark.unit

DAY = timedelta(days=1)


class TestProductCreation:
    def test_create_normal_product(self):
        p = Product.objects.create(name="USB Cable", type=ProductType.NORMAL)
        p.refresh_from_db()
        assert p.available == 0
        assert p.lead_time == 0
        assert p.season_start_date is None
        assert p.expiry_date is None
        assert p.created_at is not None
        assert p.updated_at is not None

    def test_str(self):
        p = Product(name="Milk", type=ProductType.EXPIRABLE)
        assert str(p) == "Milk (EXPIRABLE)"

    def test_partial_save_refreshes_updated_at(self):
        p = Product.objects.create(name="USB Cable", type=ProductType.NORMAL, available=2)
        before = p.updated_at
        p.available = 1
        p.save(update_fields=["available"])
        p.refresh_from_db()
        assert p.available == 1
        assert p.updated_at >= before


class TestProductValidation:
    def test_normal_product_needs_no_dates(self):
        Product(name="USB Cable", type=ProductType.NORMAL, available=1).full_clean()

    def test_seasonal_requires_both_dates(self):
        p = Product(name="Grapes", type=ProductType.SEASONAL)
        with pytest.raises(ValidationError) as exc_info:
            p.full_clean()
        assert "season_start_date" in exc_info.value.message_dict
        assert "season_end_date" in exc_info.value.message_dict

    def test_seasonal_end_must_follow_start(self):
        now = timezone.now()
        p = Product(
            name="Grapes",
            type=ProductType.SEASONAL,
            season_start_date=now,
            season_end_date=now - DAY,
        )
        with pytest.raises(ValidationError) as exc_info:
            p.full_clean()
        assert "season_end_date" in exc_info.value.message_dict

    def test_valid_seasonal_product(self):
        now = timezone.now()
        Product(
            name="Watermelon",
            type=ProductType.SEASONAL,
            season_start_date=now - DAY,
            season_end_date=now + DAY,
        ).full_clean()

    def test_expirable_requires_expiry_date(self):
        p = Product(name="Milk", type=ProductType.EXPIRABLE)
        with pytest.raises(ValidationError) as exc_info:
            p.full_clean()
        assert "expiry_date" in exc_info.value.message_dict

    def test_unknown_type_rejected_by_choices(self):
        p = Product(name="Mystery", type="BUNDLE")
        with pytest.raises(ValidationError) as exc_info:
            p.full_clean()
        assert "type" in exc_info.value.message_dict

    def test_negative_available_rejected_by_database(self):
        p = Product.objects.create(name="USB Cable", type=ProductType.NORMAL)
        with pytest.raises(IntegrityError), transaction.atomic():
            Product.objects.filter(id=p.id).update(available=-1)
