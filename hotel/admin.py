from django.contrib import admin

from hotel.models import Facility, Hotel


@admin.register(Facility)
class FacilityAdmin(admin.ModelAdmin):
    search_fields = ("name",)


@admin.register(Hotel)
class HotelAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "name",
        "city",
        "country",
        "type",
        "star_rating",
        "price_per_night",
        "last_updated",
    )
    search_fields = ("name", "city", "country")
    list_filter = ("type", "star_rating", "facilities")
    filter_horizontal = ("facilities",)
    ordering = ("-last_updated",)
