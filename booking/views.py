import logging

from django.db import DatabaseError
from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiResponse,
    OpenApiTypes,
    extend_schema,
)
from rest_framework import generics, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from booking.filters import BookingFilter
from booking.models import Booking
from booking.serializers import BookingSerializer, BookRoomSerializer
from store.adapter import default_store

logger = logging.getLogger(__name__)

MISSING_CODES = {"required", "blank", "null"}


def _is_missing(errors) -> bool:
    return any(
        getattr(detail, "code", None) in MISSING_CODES
        for details in errors.values()
        for detail in details
    )


class BookRoomView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        summary="Book a room",
        request=BookRoomSerializer,
        responses={
            201: BookingSerializer,
            400: OpenApiResponse(description="Missing required fields"),
            500: OpenApiResponse(description="Booking could not be stored"),
        },
    )
    def post(self, request):
        serializer = BookRoomSerializer(data=request.data)
        if not serializer.is_valid():
            message = (
                "Missing required fields"
                if _is_missing(serializer.errors)
                else "Invalid booking data"
            )
            return Response(
                {"success": False, "message": message, "errors": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        result = default_store.create("bookings", serializer.to_record())
        if not result.ok:
            return Response(
                {
                    "success": False,
                    "message": "Internal Server Error",
                    "error": result.error,
                },
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        booking = Booking.objects.get(pk=result.id)
        logger.info(f"Booking {booking.id} created for room {booking.room}")
        return Response(
            {
                "success": True,
                "message": "Booking created successfully",
                "data": BookingSerializer(booking).data,
            },
            status=status.HTTP_201_CREATED,
        )


class BookingListView(generics.ListAPIView):
    queryset = Booking.objects.all().order_by("-check_in_date")
    serializer_class = BookingSerializer
    authentication_classes = []
    permission_classes = [AllowAny]
    filterset_class = BookingFilter

    @extend_schema(
        summary="List bookings",
        description=(
            "Retrieve every booking made through the public booking endpoint.\n\n"
            "Dates are serialized as ISO 8601 strings."
        ),
        parameters=[
            OpenApiParameter(
                name="status",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Booking status (confirmed, cancelled)",
                required=False,
            ),
            OpenApiParameter(
                name="roomId",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Filter by room identifier",
                required=False,
            ),
            OpenApiParameter(
                name="from_date",
                type=OpenApiTypes.DATE,
                location=OpenApiParameter.QUERY,
                description="Filter bookings with check-in date from this date",
                required=False,
            ),
            OpenApiParameter(
                name="to_date",
                type=OpenApiTypes.DATE,
                location=OpenApiParameter.QUERY,
                description="Filter bookings with check-out date to this date",
                required=False,
            ),
        ],
    )
    def get(self, request, *args, **kwargs):
        try:
            bookings = self.filter_queryset(self.get_queryset())
            data = self.get_serializer(bookings, many=True).data
        except DatabaseError as e:
            logger.exception("Error fetching bookings")
            return Response(
                {"success": False, "message": "Internal Server Error", "error": str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(
            {
                "success": True,
                "message": "Bookings retrieved successfully",
                "data": data,
            }
        )
