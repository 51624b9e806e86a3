"""Order API views.

Exposes the ``OrderProcessingService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into appropriate
HTTP status codes; generic exceptions propagate.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.notifications.services import get_notification_service
from modules.orders.exceptions import OrderNotFound
from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import OrderSerializer, ProcessOrderResponseSerializer
from modules.orders.services import OrderProcessingService
from modules.products.exceptions import UnknownProductType
from modules.products.repositories.django_repository import ProductDjangoRepository


class OrderViewSet(GenericViewSet):
    """ViewSet for Order operations.

    Uses ``OrderProcessingService`` with injected repositories and the
    configured notification service (DIP).  Order ids are integers: any
    other path segment does not match the route.
    """

    queryset = Order.objects.all()
    serializer_class = OrderSerializer
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._order_repo = OrderDjangoRepository()
        self._service = OrderProcessingService(
            order_repository=self._order_repo,
            product_repository=ProductDjangoRepository(),
            notification_service=get_notification_service(),
        )

    # ------------------------------------------------------------------
    # Retrieve
    # ------------------------------------------------------------------

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /orders/{pk}"""
        order = self._order_repo.get_by_id(pk)
        if not order:
            return Response(
                {"detail": f"Order {pk} not found."},
                status=status.HTTP_404_NOT_FOUND,
            )
        serializer = OrderSerializer(order)
        return Response(serializer.data)

    # ------------------------------------------------------------------
    # Process
    # ------------------------------------------------------------------

    @extend_schema(
        request=None,
        responses={
            200: ProcessOrderResponseSerializer,
            404: OpenApiResponse(description="Order not found."),
            422: OpenApiResponse(description="Unsupported product type."),
        },
    )
    @action(detail=True, methods=["post"], url_path="processOrder")
    def process_order(self, request: Request, pk: str | None = None) -> Response:
        """POST /orders/{pk}/processOrder

        Ships available line items and notifies the customer about the
        others.  Responds with ``{"orderId": <id>}``.
        """
        try:
            result = self._service.process_order(int(pk))
        except OrderNotFound as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_404_NOT_FOUND,
            )
        except UnknownProductType as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_422_UNPROCESSABLE_ENTITY,
            )

        return Response(result.model_dump(by_alias=True), status=status.HTTP_200_OK)
