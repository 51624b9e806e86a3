from django.apps import AppConfig


class OrdersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.orders"
    label = "orders"

    def ready(self) -> None:
        from modules.orders.events import OrderProcessed
        from modules.orders.handlers import order_processed_handler
        from shared.infrastructure.bus import event_bus

        event_bus.subscribe(OrderProcessed, order_processed_handler)
