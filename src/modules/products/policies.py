"""Availability policies, one per product type.

A policy answers a single question for one product at a given instant:
can one unit be shipped now, and if not, which notification must the
customer receive?  Policies are pure: they read the product and the
reference timestamp, never the database, and never mutate anything.

Rules:
- NORMAL: fulfil when in stock; otherwise notify a delay of
  ``lead_time`` days, unless ``lead_time <= 0`` (nothing is sent).
- SEASONAL: fulfil when in season (bounds exclusive) and in stock;
  in season but out of stock notifies a delay, out of season notifies
  out-of-stock whatever the quantity.
- EXPIRABLE: fulfil when in stock and not expired (``now > expiry``);
  otherwise notify expiration.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Dict

from modules.products.exceptions import UnknownProductType
from modules.products.models import ProductType

if TYPE_CHECKING:
    from modules.products.models import Product


class FulfilmentDecision(str, Enum):
    FULFIL = "fulfil"
    NOTIFY_DELAY = "notify_delay"
    NOTIFY_OUT_OF_STOCK = "notify_out_of_stock"
    NOTIFY_EXPIRATION = "notify_expiration"
    SKIP = "skip"

    @property
    def is_fulfilment(self) -> bool:
        return self is FulfilmentDecision.FULFIL


class ProductPolicy(ABC):
    """Base class for per-type availability rules."""

    @abstractmethod
    def evaluate(self, product: Product, now: datetime) -> FulfilmentDecision:
        """Decide what happens to one requested unit of *product* at *now*."""

    @staticmethod
    def has_stock(product: Product) -> bool:
        return product.available > 0


class NormalProductPolicy(ProductPolicy):
    def evaluate(self, product: Product, now: datetime) -> FulfilmentDecision:
        if self.has_stock(product):
            return FulfilmentDecision.FULFIL
        if product.lead_time > 0:
            return FulfilmentDecision.NOTIFY_DELAY
        return FulfilmentDecision.SKIP


class SeasonalProductPolicy(ProductPolicy):
    @staticmethod
    def is_in_season(product: Product, now: datetime) -> bool:
        return product.season_start_date < now < product.season_end_date

    def evaluate(self, product: Product, now: datetime) -> FulfilmentDecision:
        in_season = self.is_in_season(product, now)
        if in_season and self.has_stock(product):
            return FulfilmentDecision.FULFIL
        if in_season:
            return FulfilmentDecision.NOTIFY_DELAY
        return FulfilmentDecision.NOTIFY_OUT_OF_STOCK


class ExpirableProductPolicy(ProductPolicy):
    @staticmethod
    def is_expired(product: Product, now: datetime) -> bool:
        return now > product.expiry_date

    def evaluate(self, product: Product, now: datetime) -> FulfilmentDecision:
        if self.has_stock(product) and not self.is_expired(product, now):
            return FulfilmentDecision.FULFIL
        return FulfilmentDecision.NOTIFY_EXPIRATION


POLICIES: Dict[str, ProductPolicy] = {
    ProductType.NORMAL.value: NormalProductPolicy(),
    ProductType.SEASONAL.value: SeasonalProductPolicy(),
    ProductType.EXPIRABLE.value: ExpirableProductPolicy(),
}


def policy_for(product: Product) -> ProductPolicy:
    """Return the policy matching ``product.type``.

    Raises:
        UnknownProductType: the type has no registered policy.
    """
    try:
        return POLICIES[str(product.type)]
    except KeyError:
        raise UnknownProductType(
            f"Product {product.id} has unsupported type {product.type!r}."
        ) from None
