"""Notification service implementations and resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from django.conf import settings
from django.utils.module_loading import import_string

if TYPE_CHECKING:
    from modules.notifications.interfaces import INotificationService
    from modules.products.models import Product

logger = structlog.get_logger(__name__)


class LoggingNotificationService:
    """Emits one structured log event per notification.

    Default implementation for development and for deployments where a
    log shipper forwards ``notification.*`` events to the messaging
    platform.
    """

    def send_delay_notification(self, lead_time: int, product_name: str) -> None:
        logger.info(
            "notification.delay_sent",
            lead_time=lead_time,
            product_name=product_name,
        )

    def send_out_of_stock_notification(self, product_name: str) -> None:
        logger.info("notification.out_of_stock_sent", product_name=product_name)

    def send_expiration_notification(self, product: Product) -> None:
        logger.info(
            "notification.expiration_sent",
            product_id=product.id,
            product_name=product.name,
            expiry_date=product.expiry_date.isoformat() if product.expiry_date else None,
        )


def get_notification_service() -> INotificationService:
    """Instantiate the class named by ``settings.NOTIFICATION_SERVICE``."""
    service_class = import_string(settings.NOTIFICATION_SERVICE)
    return service_class()
