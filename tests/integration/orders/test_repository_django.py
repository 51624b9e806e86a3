"""Integration tests for the Django repositories used by order processing.

Covers:
- Order read with eager-loaded items and products (fixed query count).
- Line items returned in insertion order.
- Missing / malformed order ids.
- Product row lock look-up and stock decrement guard.
"""

from __future__ import annotations

import pytest

from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.repositories.interfaces import IOrderRepository
from modules.products.exceptions import InsufficientStock
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository

pytestmark = pytest.mark.integration


@pytest.fixture()
def order_repo():
    return OrderDjangoRepository()


@pytest.fixture()
def product_repo():
    return ProductDjangoRepository()


class TestOrderRepository:
    def test_implements_interface(self, order_repo):
        assert isinstance(order_repo, IOrderRepository)

    def test_get_by_id_loads_items_and_products(
        self, order_repo, make_product, make_order, django_assert_num_queries
    ):
        first = make_product(name="USB Cable")
        second = make_product(name="USB Dongle")
        order = make_order(first, second)

        with django_assert_num_queries(3):
            loaded = order_repo.get_by_id(order.id)
            names = [item.product.name for item in order_repo.get_line_items(loaded)]

        assert names == ["USB Cable", "USB Dongle"]

    def test_line_items_keep_insertion_order(self, order_repo, make_product, make_order):
        products = [make_product(name=f"P{index}") for index in range(5)]
        order = make_order(*reversed(products))

        items = order_repo.get_line_items(order_repo.get_by_id(order.id))

        assert [item.product.name for item in items] == ["P4", "P3", "P2", "P1", "P0"]

    def test_get_by_id_missing_returns_none(self, order_repo):
        assert order_repo.get_by_id(123456) is None

    def test_get_by_id_malformed_returns_none(self, order_repo):
        assert order_repo.get_by_id("not-a-number") is None

    def test_save_persists_order(self, order_repo):
        order = order_repo.save(Order())
        assert Order.objects.filter(id=order.id).exists()


class TestProductRepository:
    def test_implements_interface(self, product_repo):
        assert isinstance(product_repo, IProductRepository)

    def test_get_for_update_returns_fresh_row(self, product_repo, make_product):
        product = make_product(available=3)
        type(product).objects.filter(id=product.id).update(available=2)

        locked = product_repo.get_for_update(product.id)

        assert locked.available == 2

    def test_get_for_update_missing_returns_none(self, product_repo):
        assert product_repo.get_for_update(987654) is None

    def test_decrement_stock_persists(self, product_repo, make_product):
        product = make_product(available=3)

        product_repo.decrement_stock(product)

        product.refresh_from_db()
        assert product.available == 2

    def test_decrement_stock_refuses_to_go_negative(self, product_repo, make_product):
        product = make_product(available=0)

        with pytest.raises(InsufficientStock):
            product_repo.decrement_stock(product)

        product.refresh_from_db()
        assert product.available == 0

    def test_get_by_id(self, product_repo, make_product):
        product = make_product(name="Butter")
        assert product_repo.get_by_id(product.id).name == "Butter"
        assert product_repo.get_by_id(product.id + 1000) is None

    def test_save_persists_product(self, product_repo):
        from modules.products.models import Product, ProductType

        product = product_repo.save(Product(name="Grapes", type=ProductType.NORMAL, available=1))

        assert Product.objects.get(id=product.id).name == "Grapes"
