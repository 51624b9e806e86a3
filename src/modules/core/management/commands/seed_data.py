from __future__ import annotations

from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from modules.orders.models import Order, OrderItem
from modules.products.models import Product, ProductType


class Command(BaseCommand):
    help = "Seed database with a sample catalogue and one order referencing it."

    def add_arguments(self, parser) -> None:
        parser.add_argument(
            "--orders",
            type=int,
            default=1,
            help="Number of orders to create over the whole catalogue.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")

        products = self._seed_products()
        order_ids = [self._seed_order(products) for _ in range(options["orders"])]

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"products={len(products)}, "
                f"orders={','.join(str(order_id) for order_id in order_ids)}"
            )
        )

    def _seed_products(self) -> list[Product]:
        self.stdout.write("Creating products...")
        now = timezone.now()
        day = timedelta(days=1)
        catalogue = [
            {"name": "USB Cable", "type": ProductType.NORMAL, "available": 30, "lead_time": 15},
            {"name": "USB Dongle", "type": ProductType.NORMAL, "available": 0, "lead_time": 10},
            {
                "name": "Butter",
                "type": ProductType.EXPIRABLE,
                "available": 30,
                "lead_time": 15,
                "expiry_date": now + 26 * day,
            },
            {
                "name": "Milk",
                "type": ProductType.EXPIRABLE,
                "available": 6,
                "lead_time": 90,
                "expiry_date": now - 2 * day,
            },
            {
                "name": "Watermelon",
                "type": ProductType.SEASONAL,
                "available": 30,
                "lead_time": 15,
                "season_start_date": now - 2 * day,
                "season_end_date": now + 58 * day,
            },
            {
                "name": "Grapes",
                "type": ProductType.SEASONAL,
                "available": 30,
                "lead_time": 15,
                "season_start_date": now + 180 * day,
                "season_end_date": now + 240 * day,
            },
        ]
        products: list[Product] = []
        for fields in catalogue:
            product = Product(**fields)
            product.full_clean()
            product.save()
            products.append(product)
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return products

    def _seed_order(self, products: list[Product]) -> int:
        order = Order.objects.create()
        OrderItem.objects.bulk_create(
            [OrderItem(order=order, product=product) for product in products]
        )
        return order.id
