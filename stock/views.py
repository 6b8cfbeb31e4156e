from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import extend_schema
from rest_framework import filters
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import ModelViewSet

from room.permissions import IsAdminOrReadOnly
from stock.models import StockItem
from stock.serializers import (
    StockCountSerializer,
    StockItemSerializer,
    StockSummarySerializer,
)
from stock.services.levels import stock_summary
from store.mixins import StoreWriteMixin


class StockItemViewSet(StoreWriteMixin, ModelViewSet):
    queryset = StockItem.objects.all().order_by("name")
    serializer_class = StockItemSerializer
    lookup_field = "name"
    collection = "stockItems"
    record_label = "Stock item"

    filter_backends = (DjangoFilterBackend, filters.SearchFilter)
    filterset_fields = ("category", "supplier")
    search_fields = ("name", "category", "supplier")

    def get_permissions(self):
        if self.action == "update_stock":
            return [IsAuthenticated()]
        return [IsAdminOrReadOnly()]

    def get_serializer_class(self):
        if self.action == "update_stock":
            return StockCountSerializer
        return StockItemSerializer

    @extend_schema(responses={200: StockSummarySerializer})
    @action(methods=["GET"], detail=False, url_path="summary")
    def summary(self, request):
        return Response(StockSummarySerializer(stock_summary(self.get_queryset())).data)

    @extend_schema(request=StockCountSerializer, responses={200: StockItemSerializer})
    @action(methods=["POST"], detail=True, url_path="stock")
    def update_stock(self, request, name=None):
        item = self.get_object()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self.store_update(item, {"current": serializer.validated_data["current"]})
