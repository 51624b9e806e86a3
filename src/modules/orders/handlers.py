"""Event handlers for Orders domain events."""

from __future__ import annotations

import structlog

from modules.orders.events import OrderProcessed
from shared.domain.bus import IEventHandler

logger = structlog.get_logger(__name__)


class OrderProcessedHandler(IEventHandler[OrderProcessed]):
    def handle(self, event: OrderProcessed) -> None:
        logger.info(
            "order.event.processed",
            order_id=event.aggregate_id,
            event_id=str(event.event_id),
            fulfilled=event.fulfilled_count,
            notified=event.notified_count,
            skipped=event.skipped_count,
        )


order_processed_handler = OrderProcessedHandler()
