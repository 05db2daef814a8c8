from django.contrib import admin

from booking.models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "hotel",
        "user",
        "check_in",
        "check_out",
        "adult_count",
        "child_count",
        "total_cost",
    )

    list_filter = (
        "check_in",
        "check_out",
        "hotel",
    )

    search_fields = (
        "email",
        "user__email",
        "hotel__name",
    )

    ordering = ("-check_in",)
