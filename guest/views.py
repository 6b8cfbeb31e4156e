from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import filters
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.viewsets import ModelViewSet

from guest.models import Guest
from guest.serializers import GuestSerializer, HistoryEntrySerializer
from store.mixins import StoreWriteMixin


@extend_schema(
    description=(
            "Guest register kept by the front desk.\n\n"
            "Booking history is a free-text list, newest entry last. "
            "Authentication: JWT required."
    ),
)
class GuestViewSet(StoreWriteMixin, ModelViewSet):
    queryset = Guest.objects.all().order_by("name")
    serializer_class = GuestSerializer
    permission_classes = (IsAuthenticated,)
    collection = "guests"
    record_label = "Guest"

    filter_backends = (filters.SearchFilter,)
    search_fields = ("name", "email", "phone")

    def get_serializer_class(self):
        if self.action == "add_history":
            return HistoryEntrySerializer
        return GuestSerializer

    @extend_schema(
        summary="Append a booking history entry",
        request=HistoryEntrySerializer,
        responses={
            200: GuestSerializer,
            404: OpenApiResponse(description="Guest not found"),
        },
    )
    @action(methods=["POST"], detail=True, url_path="history")
    def add_history(self, request, pk=None):
        guest = self.get_object()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        history = [*guest.booking_history, serializer.validated_data["entry"]]
        return self.store_update(guest, {"booking_history": history})
