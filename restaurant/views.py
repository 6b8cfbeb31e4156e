import logging

from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import extend_schema
from rest_framework import filters
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.viewsets import ModelViewSet

from restaurant.models import MenuItem, Order
from restaurant.serializers import (
    MenuItemSerializer,
    OrderSerializer,
    OrderStatusSerializer,
)
from restaurant.services import next_order_code
from room.permissions import IsAdminOrReadOnly
from store.mixins import StoreWriteMixin

logger = logging.getLogger(__name__)


class MenuItemViewSet(StoreWriteMixin, ModelViewSet):
    queryset = MenuItem.objects.all().order_by("category", "name")
    serializer_class = MenuItemSerializer
    permission_classes = (IsAdminOrReadOnly,)
    lookup_field = "name"
    collection = "menuItems"
    record_label = "Menu item"

    filter_backends = (DjangoFilterBackend, filters.SearchFilter)
    filterset_fields = ("category", "status")
    search_fields = ("name", "category")


class OrderViewSet(StoreWriteMixin, ModelViewSet):
    queryset = Order.objects.all()
    serializer_class = OrderSerializer
    permission_classes = (IsAuthenticated,)
    lookup_field = "code"
    collection = "orders"
    record_label = "Order"

    filter_backends = (DjangoFilterBackend, filters.SearchFilter)
    filterset_fields = ("status", "table", "room")
    search_fields = ("code", "items")

    def get_serializer_class(self):
        if self.action == "update_status":
            return OrderStatusSerializer
        return OrderSerializer

    def creation_record(self, validated_data) -> dict:
        record = {**validated_data, "code": next_order_code()}
        logger.info(f"Order {record['code']} placed for table {record['table']}")
        return record

    @extend_schema(request=OrderStatusSerializer, responses={200: OrderSerializer})
    @action(methods=["POST"], detail=True, url_path="status")
    def update_status(self, request, code=None):
        order = self.get_object()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self.store_update(order, {"status": serializer.validated_data["status"]})
