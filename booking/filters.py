import django_filters

from booking.models import Booking


class BookingFilter(django_filters.FilterSet):
    from_date = django_filters.DateFilter(
        field_name="check_in", lookup_expr="gte"
    )
    to_date = django_filters.DateFilter(
        field_name="check_out", lookup_expr="lte"
    )

    class Meta:
        model = Booking
        fields = ["from_date", "to_date"]
