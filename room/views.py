import logging
from datetime import timedelta

from django.db import DatabaseError
from django.db.models import Sum
from django.utils.dateparse import parse_date
from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import filters, status
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import ModelViewSet

from bar.models import BarSale
from booking.services.availability import availability_on, room_stats, stay_covers
from booking.services.occupancy import ROOM, has_lapsed, vacated_fields
from booking.services.pricing import folio_total, room_total, to_money
from payment.serializers import (
    LedgerSerializer,
    RecordPaymentSerializer,
)
from payment.services.ledger import balance_due, record_payment
from restaurant.models import Order
from room.models import Room
from room.permissions import IsAdminOrReadOnly
from room.serializers import (
    OccupyRoomSerializer,
    RoomBillSerializer,
    RoomCalendarSerializer,
    RoomSerializer,
)
from store.exceptions import StoreUnavailable
from store.mixins import StoreWriteMixin
from store.signals import write_failed

logger = logging.getLogger(__name__)

FRONT_DESK_ACTIONS = ("occupy", "checkout", "maintenance", "payments", "bill")

DATE_PARAMETER = OpenApiParameter(
    name="date",
    type=OpenApiTypes.DATE,
    location=OpenApiParameter.QUERY,
    description="Show availability for this day (YYYY-MM-DD)",
    required=False,
)


def parse_day(value):
    try:
        return parse_date(value)
    except ValueError:
        return None


def selected_day(request):
    value = request.query_params.get("date")
    if not value:
        return None
    day = parse_day(value)
    if day is None:
        raise ValidationError({"date": "Invalid date format. Use YYYY-MM-DD."})
    return day


class RoomViewSet(StoreWriteMixin, ModelViewSet):
    queryset = Room.objects.all().order_by("number")
    serializer_class = RoomSerializer
    lookup_field = "number"
    collection = "rooms"
    record_label = "Room"
    occupancy_kind = ROOM

    filter_backends = (DjangoFilterBackend, filters.SearchFilter)
    filterset_fields = ("status", "type")
    search_fields = ("number", "guest", "status")

    def get_permissions(self):
        if self.action in FRONT_DESK_ACTIONS:
            return [IsAuthenticated()]
        return [IsAdminOrReadOnly()]

    def get_serializer_class(self):
        if self.action == "occupy":
            return OccupyRoomSerializer
        if self.action == "get_calendar":
            return RoomCalendarSerializer
        return RoomSerializer

    @extend_schema(parameters=[DATE_PARAMETER])
    def list(self, request, *args, **kwargs):
        day = selected_day(request)
        rooms = self.filter_queryset(self.get_queryset())
        data = RoomSerializer(rooms, many=True).data

        if day is not None:
            availability = availability_on(data, day, "number", "guest")
            for room in data:
                room["availability"] = availability[room["number"]]
        return Response(data)

    @extend_schema(parameters=[DATE_PARAMETER])
    @action(methods=["GET"], detail=False, url_path="stats")
    def stats(self, request):
        day = selected_day(request)
        rooms = RoomSerializer(self.get_queryset(), many=True).data
        return Response(room_stats(rooms, day=day))

    @extend_schema(request=OccupyRoomSerializer, responses={200: RoomSerializer})
    @action(methods=["POST"], detail=True, url_path="occupy")
    def occupy(self, request, number=None):
        room = self.get_object()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        values = serializer.validated_data

        changes = {
            **values,
            "status": Room.RoomStatus.OCCUPIED,
            "total_price": room_total(room.price, values["check_in"], values["check_out"]),
            "paid_amount": values["advance_amount"],
        }
        response = self.store_update(room, changes)
        logger.info(f"Room {room.number} occupied by {values['guest']}")
        return response

    @extend_schema(request=None, responses={200: RoomSerializer})
    @action(methods=["POST"], detail=True, url_path="checkout")
    def checkout(self, request, number=None):
        room = self.get_object()

        if room.status != Room.RoomStatus.OCCUPIED:
            return Response(
                {"detail": "Only occupied rooms can be checked out."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        changes = {"status": Room.RoomStatus.CLEANING, **vacated_fields(ROOM)}
        return self.store_update(room, changes)

    @extend_schema(request=None, responses={200: RoomSerializer})
    @action(methods=["POST"], detail=True, url_path="maintenance")
    def maintenance(self, request, number=None):
        room = self.get_object()
        return self.store_update(room, {"status": Room.RoomStatus.MAINTENANCE})

    @extend_schema(
        request=RecordPaymentSerializer,
        responses={200: LedgerSerializer, 201: LedgerSerializer},
    )
    @action(methods=["GET", "POST"], detail=True, url_path="payments")
    def payments(self, request, number=None):
        room = self.get_object()

        if request.method == "GET":
            return Response(self._ledger(room, list(room.transactions.all())))

        if room.status != Room.RoomStatus.OCCUPIED or has_lapsed(
            {"status": room.status, "check_out": room.check_out}, ROOM
        ):
            return Response(
                {"detail": "Payments can only be recorded for occupied rooms."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        serializer = RecordPaymentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            entry = record_payment(room, **serializer.validated_data)
        except DatabaseError as e:
            write_failed.send(
                sender=self.__class__,
                collection="rooms",
                operation="payment",
                payload=serializer.validated_data,
                error=e,
            )
            raise StoreUnavailable()

        return Response(
            self._ledger(room, entry.transactions),
            status=status.HTTP_201_CREATED,
        )

    @staticmethod
    def _ledger(room, transactions):
        total = to_money(room.total_price)
        paid = to_money(room.paid_amount)
        return LedgerSerializer(
            {
                "total_price": total,
                "paid_amount": paid,
                "balance_due": balance_due(total, paid),
                "transactions": transactions,
            }
        ).data

    @extend_schema(responses={200: RoomBillSerializer})
    @action(methods=["GET"], detail=True, url_path="bill")
    def bill(self, request, number=None):
        room = self.get_object()

        if room.status != Room.RoomStatus.OCCUPIED:
            return Response(
                {"detail": "Bills are only available for occupied rooms."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        sales = BarSale.objects.filter(room=room.number)
        orders = Order.objects.filter(room=room.number)
        if room.check_in:
            sales = sales.filter(sold_at__gte=room.check_in)
            orders = orders.filter(created_at__gte=room.check_in)

        room_charge = to_money(room.total_price or room.price)
        bar = to_money(sales.aggregate(total=Sum("total_price"))["total"])
        restaurant = to_money(orders.aggregate(total=Sum("price"))["total"])
        total = folio_total(room_charge, bar, restaurant)
        paid = to_money(room.paid_amount)

        serializer = RoomBillSerializer(
            {
                "room_number": room.number,
                "guest": room.guest,
                "room": room_charge,
                "bar": bar,
                "restaurant": restaurant,
                "total": total,
                "paid": paid,
                "balance_due": balance_due(total, paid),
            }
        )
        return Response(serializer.data)

    @extend_schema(
        request=None,
        parameters=[
            OpenApiParameter(
                name="date_from",
                type=OpenApiTypes.DATE,
                location=OpenApiParameter.QUERY,
                description="Start date (YYYY-MM-DD)",
                required=True,
            ),
            OpenApiParameter(
                name="date_to",
                type=OpenApiTypes.DATE,
                location=OpenApiParameter.QUERY,
                description="End date (YYYY-MM-DD)",
                required=True,
            ),
        ],
        responses={200: RoomCalendarSerializer(many=True)},
        description=(
                "Get room availability calendar for a given date range.\n\n"
                "A day is unavailable when the room is occupied and the day falls "
                "between the check-in and check-out days."
        ),
    )
    @action(methods=["GET"], detail=True, url_path="calendar", filter_backends=[])
    def get_calendar(self, request, number=None):
        room = self.get_object()

        date_from_str = request.query_params.get("date_from")
        date_to_str = request.query_params.get("date_to")

        if not date_from_str or not date_to_str:
            return Response(
                {"detail": "date_from and date_to are required"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        date_from = parse_day(date_from_str)
        date_to = parse_day(date_to_str)

        if not date_from or not date_to:
            return Response(
                {"detail": "Invalid date format. Use YYYY-MM-DD."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        if date_from > date_to:
            return Response(
                {"detail": "date_from must be before date_to"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        record = RoomSerializer(room).data
        occupied = record["status"] == Room.RoomStatus.OCCUPIED

        calendar = []
        current_date = date_from
        while current_date <= date_to:
            calendar.append({
                "date": current_date,
                "available": not (occupied and stay_covers(record, current_date)),
            })
            current_date += timedelta(days=1)

        serializer = RoomCalendarSerializer(calendar, many=True)
        return Response(serializer.data)
