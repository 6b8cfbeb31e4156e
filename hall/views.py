import logging

from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import extend_schema
from rest_framework import filters, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import ModelViewSet

from booking.services.availability import availability_on, hall_stats
from booking.services.occupancy import HALL, vacated_fields
from booking.services.pricing import (
    HALL_ADD_ONS,
    add_on_cost,
    combine,
    food_cost,
    hall_hours,
    hall_total,
    to_money,
)
from hall.models import Hall
from hall.serializers import (
    AddOnSerializer,
    BookHallSerializer,
    HallQuoteSerializer,
    HallSerializer,
)
from room.permissions import IsAdminOrReadOnly
from room.views import DATE_PARAMETER, selected_day
from store.mixins import StoreWriteMixin

logger = logging.getLogger(__name__)

FRONT_DESK_ACTIONS = ("book", "release", "maintenance", "quote")


def price_booking(hall, values):
    start = combine(values["check_in_date"], values["check_in_time"])
    end = combine(values["check_out_date"], values["check_out_time"])
    hours = hall_hours(start, end)
    return {
        "start": start,
        "end": end,
        "hours": hours,
        "hall_cost": hours * to_money(hall.price),
        "food_cost": food_cost(values["adults"], values["children"]),
        "add_ons_cost": add_on_cost(values["add_ons"]),
        "total": hall_total(
            hall.price,
            start,
            end,
            values["adults"],
            values["children"],
            values["add_ons"],
        ),
    }


class HallViewSet(StoreWriteMixin, ModelViewSet):
    queryset = Hall.objects.all().order_by("name")
    serializer_class = HallSerializer
    lookup_field = "name"
    collection = "halls"
    record_label = "Hall"
    occupancy_kind = HALL

    filter_backends = (DjangoFilterBackend, filters.SearchFilter)
    filterset_fields = ("status",)
    search_fields = ("name", "customer_name")

    def get_permissions(self):
        if self.action in FRONT_DESK_ACTIONS:
            return [IsAuthenticated()]
        return [IsAdminOrReadOnly()]

    def get_serializer_class(self):
        if self.action in ("book", "quote"):
            return BookHallSerializer
        return HallSerializer

    @extend_schema(parameters=[DATE_PARAMETER])
    def list(self, request, *args, **kwargs):
        day = selected_day(request)
        halls = self.filter_queryset(self.get_queryset())
        data = HallSerializer(halls, many=True).data

        if day is not None:
            availability = availability_on(data, day, "name", "customer_name")
            for hall in data:
                hall["availability"] = availability[hall["name"]]
        return Response(data)

    @extend_schema(parameters=[DATE_PARAMETER])
    @action(methods=["GET"], detail=False, url_path="stats")
    def stats(self, request):
        day = selected_day(request)
        halls = HallSerializer(self.get_queryset(), many=True).data
        return Response(hall_stats(halls, day=day))

    @extend_schema(request=None, responses={200: AddOnSerializer(many=True)})
    @action(methods=["GET"], detail=False, url_path="add-ons")
    def add_ons(self, request):
        catalog = [{"id": add_on_id, **add_on} for add_on_id, add_on in HALL_ADD_ONS.items()]
        return Response(AddOnSerializer(catalog, many=True).data)

    @extend_schema(request=BookHallSerializer, responses={200: HallQuoteSerializer})
    @action(methods=["POST"], detail=True, url_path="quote")
    def quote(self, request, name=None):
        hall = self.get_object()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return Response(HallQuoteSerializer(price_booking(hall, serializer.validated_data)).data)

    @extend_schema(request=BookHallSerializer, responses={200: HallSerializer})
    @action(methods=["POST"], detail=True, url_path="book")
    def book(self, request, name=None):
        hall = self.get_object()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        values = serializer.validated_data
        charges = price_booking(hall, values)

        changes = {
            "status": Hall.HallStatus.BOOKED,
            "customer_name": values["customer_name"],
            "contact": values["contact"],
            "purpose": values.get("purpose"),
            "email": values.get("email"),
            "id_proof": values["id_proof"],
            "check_in": charges["start"],
            "check_out": charges["end"],
            "check_in_time": values["check_in_time"].strftime("%H:%M"),
            "check_out_time": values["check_out_time"].strftime("%H:%M"),
            "adults": values["adults"],
            "children": values["children"],
            "food_preference": values["food_preference"],
            "add_ons": list(values["add_ons"]),
            "food_cost": charges["food_cost"],
            "total_price": charges["total"],
        }
        response = self.store_update(hall, changes)
        logger.info(f"Hall {hall.name} booked by {values['customer_name']}")
        return response

    @extend_schema(request=None, responses={200: HallSerializer})
    @action(methods=["POST"], detail=True, url_path="release")
    def release(self, request, name=None):
        hall = self.get_object()

        if hall.status != Hall.HallStatus.BOOKED:
            return Response(
                {"detail": "Only booked halls can be released."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        changes = {"status": Hall.HallStatus.AVAILABLE, **vacated_fields(HALL)}
        return self.store_update(hall, changes)

    @extend_schema(request=None, responses={200: HallSerializer})
    @action(methods=["POST"], detail=True, url_path="maintenance")
    def maintenance(self, request, name=None):
        hall = self.get_object()
        return self.store_update(hall, {"status": Hall.HallStatus.MAINTENANCE})
