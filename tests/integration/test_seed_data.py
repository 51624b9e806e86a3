"""Integration tests for the ``seed_data`` management command."""

from __future__ import annotations

from io import StringIO

import pytest
from django.core.management import call_command

from modules.orders.models import Order
from modules.products.models import Product, ProductType

pytestmark = pytest.mark.integration


def test_seed_creates_catalogue_and_order():
    out = StringIO()

    call_command("seed_data", stdout=out)

    assert Product.objects.count() == 6
    assert set(Product.objects.values_list("type", flat=True)) == set(ProductType.values)
    order = Order.objects.get()
    assert order.items.count() == 6
    assert "Seed completed" in out.getvalue()


def test_seed_creates_requested_number_of_orders():
    call_command("seed_data", "--orders", "3", stdout=StringIO())

    assert Order.objects.count() == 3


def test_seeded_order_can_be_processed(api_client, notification_service):
    call_command("seed_data", stdout=StringIO())
    order = Order.objects.get()

    response = api_client.post(f"/orders/{order.id}/processOrder")

    assert response.status_code == 200
    assert Product.objects.get(name="USB Cable").available == 29
    assert Product.objects.get(name="Grapes").available == 30
    notification_service.send_out_of_stock_notification.assert_called_once_with("Grapes")
