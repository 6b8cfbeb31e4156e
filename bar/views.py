import logging

from django.db import DatabaseError
from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import extend_schema
from rest_framework import filters, mixins, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet, ModelViewSet

from bar.models import BarProduct, BarSale
from bar.serializers import (
    BarProductSerializer,
    BarSaleSerializer,
    RecordSaleSerializer,
    StockLevelSerializer,
)
from bar.services.inventory import InsufficientStock, record_sale
from room.permissions import IsAdminOrReadOnly
from store.exceptions import StoreUnavailable
from store.mixins import StoreWriteMixin
from store.signals import write_failed

logger = logging.getLogger(__name__)


class BarProductViewSet(StoreWriteMixin, ModelViewSet):
    queryset = BarProduct.objects.all().order_by("name")
    serializer_class = BarProductSerializer
    lookup_field = "name"
    collection = "barProducts"
    record_label = "Product"

    filter_backends = (DjangoFilterBackend, filters.SearchFilter)
    filterset_fields = ("type",)
    search_fields = ("name", "type")

    def get_permissions(self):
        if self.action == "update_stock":
            return [IsAuthenticated()]
        return [IsAdminOrReadOnly()]

    def get_serializer_class(self):
        if self.action == "update_stock":
            return StockLevelSerializer
        return BarProductSerializer

    @extend_schema(request=StockLevelSerializer, responses={200: BarProductSerializer})
    @action(methods=["POST"], detail=True, url_path="stock")
    def update_stock(self, request, name=None):
        product = self.get_object()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self.store_update(product, {"stock": serializer.validated_data["stock"]})


class BarSaleViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    GenericViewSet,
):
    queryset = BarSale.objects.all()
    serializer_class = BarSaleSerializer
    permission_classes = (IsAuthenticated,)

    filter_backends = (DjangoFilterBackend,)
    filterset_fields = ("product", "room")

    def get_serializer_class(self):
        if self.action == "create":
            return RecordSaleSerializer
        return BarSaleSerializer

    @extend_schema(request=RecordSaleSerializer, responses={201: BarSaleSerializer})
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        values = serializer.validated_data

        try:
            receipt = record_sale(
                values["product"], values["quantity"], room=values.get("room")
            )
        except InsufficientStock as e:
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except DatabaseError as e:
            write_failed.send(
                sender=self.__class__,
                collection="barSales",
                operation="create",
                payload={"product": values["product"].name, "quantity": values["quantity"]},
                error=e,
            )
            raise StoreUnavailable()

        logger.info(
            f"Sold {receipt.sale.quantity} x {receipt.sale.product}, "
            f"{receipt.remaining_stock} left"
        )
        return Response(
            BarSaleSerializer(receipt.sale).data, status=status.HTTP_201_CREATED
        )
