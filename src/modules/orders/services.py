"""Order processing service (Use Case).

Ships what can be shipped from an existing order and notifies the
customer about everything else.  The whole run is one unit of work:
``process_order`` is atomic, so a failure on any line item rolls back
every stock decrement made for the request.

Business rules enforced:
- RN-PED-002: each line item consumes at most one unit of stock.
- RN-PED-003: line items are handled in order.
- RN-PRO-001: stock is decremented only when the policy allows it and
  never below zero (row locked with SELECT FOR UPDATE).
- Every line item must have a known product type; unknown types fail
  the request before any side effect.

Processing the same order twice ships it twice: line items carry no
"processed" marker.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

import structlog

from django.db import transaction
from django.utils import timezone

from modules.orders.dtos import LineItemOutcomeDTO, ProcessOrderOutputDTO
from modules.orders.events import OrderProcessed
from modules.orders.exceptions import OrderNotFound
from modules.products.policies import FulfilmentDecision, policy_for
from shared.infrastructure.bus import event_bus as default_event_bus

if TYPE_CHECKING:
    from modules.notifications.interfaces import INotificationService
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository
    from shared.domain.bus import IEventBus

logger = structlog.get_logger(__name__)


class OrderProcessingService:
    """Application service for the order processing use-case.

    Receives repositories, the notification collaborator and the event
    bus via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        product_repository: IProductRepository,
        notification_service: INotificationService,
        event_bus: Optional[IEventBus] = None,
    ) -> None:
        self._order_repo = order_repository
        self._product_repo = product_repository
        self._notifications = notification_service
        self._event_bus = event_bus if event_bus is not None else default_event_bus

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def process_order(
        self, order_id: int, now: Optional[datetime] = None
    ) -> ProcessOrderOutputDTO:
        """Process every line item of an order.

        Steps:
        1. Load the order with its line items and products.
        2. Resolve the availability policy of every line item.
        3. For each line item, in order:
           - Lock and re-read the product row.
           - Evaluate the policy at ``now``.
           - Fulfil (decrement stock) or notify the customer.
        4. Publish ``OrderProcessed``.

        ``now`` defaults to the current time; it is read once so every
        line item of a request is judged against the same instant.

        Raises:
            OrderNotFound: order does not exist.
            UnknownProductType: a line item's product has no policy.
        """
        log = logger.bind(order_id=order_id)

        order = self._order_repo.get_by_id(order_id)
        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")

        line_items = self._order_repo.get_line_items(order)
        if not line_items:
            log.info("order.no_line_items")
            return ProcessOrderOutputDTO(order_id=order.id)

        plan = [(item, policy_for(item.product)) for item in line_items]
        current = now or timezone.now()
        log.info("order.processing_started", item_count=len(plan))

        outcomes: List[LineItemOutcomeDTO] = []
        for item, policy in plan:
            product = self._product_repo.get_for_update(item.product_id) or item.product
            decision = policy.evaluate(product, current)

            if decision.is_fulfilment:
                self._product_repo.decrement_stock(product)
                log.info(
                    "order.item_fulfilled",
                    line_item_id=item.id,
                    product_id=product.id,
                    remaining=product.available,
                )
            else:
                self._notify(decision, product)
                log.info(
                    "order.item_not_fulfilled",
                    line_item_id=item.id,
                    product_id=product.id,
                    decision=decision.value,
                )

            outcomes.append(
                LineItemOutcomeDTO(
                    line_item_id=item.id,
                    product_id=product.id,
                    decision=decision,
                )
            )

        result = ProcessOrderOutputDTO(order_id=order.id, line_items=tuple(outcomes))
        self._event_bus.publish(
            OrderProcessed(
                aggregate_id=order.id,
                fulfilled_count=result.fulfilled_count,
                notified_count=result.notified_count,
                skipped_count=result.skipped_count,
            )
        )
        log.info(
            "order.processed",
            fulfilled=result.fulfilled_count,
            notified=result.notified_count,
            skipped=result.skipped_count,
        )
        return result

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def _notify(self, decision: FulfilmentDecision, product: Product) -> None:
        """Send the notification matching *decision*; ``SKIP`` sends nothing."""
        if decision is FulfilmentDecision.NOTIFY_DELAY:
            self._notifications.send_delay_notification(product.lead_time, product.name)
        elif decision is FulfilmentDecision.NOTIFY_OUT_OF_STOCK:
            self._notifications.send_out_of_stock_notification(product.name)
        elif decision is FulfilmentDecision.NOTIFY_EXPIRATION:
            self._notifications.send_expiration_notification(product)
