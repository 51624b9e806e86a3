"""Domain events for the Orders bounded context."""

from __future__ import annotations

from dataclasses import dataclass

from shared.domain.events import DomainEvent


@dataclass(frozen=True)
class OrderProcessed(DomainEvent):
    """Raised once every line item of an order has been processed."""

    fulfilled_count: int = 0
    notified_count: int = 0
    skipped_count: int = 0
