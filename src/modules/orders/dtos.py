"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the Service layer and the API layer.
DTOs are immutable (``frozen=True``).

- ``LineItemOutcomeDTO``: what happened to one line item.
- ``ProcessOrderOutputDTO``: result of processing an order.  Only the
  order id is serialised to clients (as ``orderId``); per-item outcomes
  stay server-side for logging and tests.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from modules.products.policies import FulfilmentDecision


class LineItemOutcomeDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    line_item_id: int
    product_id: int
    decision: FulfilmentDecision


class ProcessOrderOutputDTO(BaseModel):
    """Immutable DTO returned by ``OrderProcessingService.process_order``."""

    model_config = ConfigDict(frozen=True)

    order_id: int = Field(serialization_alias="orderId")
    line_items: tuple[LineItemOutcomeDTO, ...] = Field(default=(), exclude=True)

    def count(self, *decisions: FulfilmentDecision) -> int:
        """Number of line items that ended with one of *decisions*."""
        return sum(1 for item in self.line_items if item.decision in decisions)

    @property
    def fulfilled_count(self) -> int:
        return self.count(FulfilmentDecision.FULFIL)

    @property
    def notified_count(self) -> int:
        return self.count(
            FulfilmentDecision.NOTIFY_DELAY,
            FulfilmentDecision.NOTIFY_OUT_OF_STOCK,
            FulfilmentDecision.NOTIFY_EXPIRATION,
        )

    @property
    def skipped_count(self) -> int:
        return self.count(FulfilmentDecision.SKIP)
