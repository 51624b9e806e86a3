"""Notification collaborator contract.

The order processor depends on this protocol only; the concrete
implementation is chosen by the ``NOTIFICATION_SERVICE`` setting.
Calls are synchronous and return nothing; failures surface as
exceptions and are not caught by the processor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from modules.products.models import Product


class INotificationService(Protocol):
    def send_delay_notification(self, lead_time: int, product_name: str) -> None:
        """Tell the customer *product_name* ships in *lead_time* days."""

    def send_out_of_stock_notification(self, product_name: str) -> None:
        """Tell the customer *product_name* is out of season / unavailable."""

    def send_expiration_notification(self, product: Product) -> None:
        """Tell the customer *product* cannot ship because it expired."""
