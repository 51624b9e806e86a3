"""Integration tests for ``GET /orders/{id}``."""

from __future__ import annotations

import pytest

from modules.products.models import ProductType

pytestmark = pytest.mark.integration


def test_retrieve_returns_items_with_products(api_client, make_product, make_order, now):
    milk = make_product(name="Milk", type=ProductType.EXPIRABLE, available=6, expiry_date=now)
    cable = make_product(name="USB Cable", available=30, lead_time=15)
    order = make_order(milk, cable)

    response = api_client.get(f"/orders/{order.id}")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == order.id
    assert "created_at" in data
    assert [item["product"]["name"] for item in data["items"]] == ["Milk", "USB Cable"]
    assert data["items"][0]["product"]["type"] == "EXPIRABLE"
    assert data["items"][0]["product"]["expiry_date"] is not None
    assert data["items"][1]["product"]["available"] == 30
    assert data["items"][1]["product"]["lead_time"] == 15


def test_retrieve_unknown_order_returns_404(api_client):
    response = api_client.get("/orders/424242")

    assert response.status_code == 404
    assert response.json() == {"detail": "Order 424242 not found."}


def test_retrieve_does_not_change_stock(api_client, make_product, make_order):
    product = make_product(available=4)
    order = make_order(product)

    api_client.get(f"/orders/{order.id}")

    product.refresh_from_db()
    assert product.available == 4
