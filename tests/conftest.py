from __future__ import annotations

from datetime import timedelta
from unittest.mock import MagicMock, patch

import pytest

from django.utils import timezone
from rest_framework.test import APIClient

from modules.notifications.interfaces import INotificationService
from modules.orders.models import Order, OrderItem
from modules.products.models import Product, ProductType

DAY = timedelta(days=1)


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def notification_service():
    """Replace the configured notification service with a MagicMock.

    The mock is returned by ``get_notification_service`` for every view
    instantiated while the fixture is active.
    """
    mock = MagicMock(spec=INotificationService)
    with patch("modules.orders.views.get_notification_service", return_value=mock):
        yield mock


@pytest.fixture()
def make_product():
    """Factory creating a persisted product; defaults to an in-stock NORMAL one."""

    def _make(**overrides) -> Product:
        defaults = {
            "name": "USB Dongle",
            "type": ProductType.NORMAL,
            "available": 10,
            "lead_time": 10,
        }
        defaults.update(overrides)
        return Product.objects.create(**defaults)

    return _make


@pytest.fixture()
def make_order():
    """Factory creating an order with one line item per given product."""

    def _make(*products: Product) -> Order:
        order = Order.objects.create()
        for product in products:
            OrderItem.objects.create(order=order, product=product)
        return order

    return _make


@pytest.fixture()
def now():
    return timezone.now()


@pytest.fixture()
def in_season(now):
    return {"season_start_date": now - 2 * DAY, "season_end_date": now + 58 * DAY}


@pytest.fixture()
def out_of_season(now):
    return {"season_start_date": now + 180 * DAY, "season_end_date": now + 240 * DAY}
