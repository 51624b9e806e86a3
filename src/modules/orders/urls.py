"""Order URL configuration.

Routes (no trailing slash):
- ``GET  orders/{id}``
- ``POST orders/{id}/processOrder``
"""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.orders.views import OrderViewSet

router = SimpleRouter(trailing_slash=False)
router.register("orders", OrderViewSet, basename="order")

urlpatterns = router.urls
