import django_filters

from booking.models import Booking


class BookingFilter(django_filters.FilterSet):
    from_date = django_filters.DateFilter(
        field_name="check_in_date", lookup_expr="date__gte"
    )
    to_date = django_filters.DateFilter(
        field_name="check_out_date", lookup_expr="date__lte"
    )

    roomId = django_filters.CharFilter(field_name="room", lookup_expr="iexact")

    class Meta:
        model = Booking
        fields = ["status"]
