from django.urls import path

from booking.views import HotelBookingsView, MyBookingsView, PaymentIntentView

urlpatterns = [
    path(
        "hotels/<int:hotel_id>/bookings",
        HotelBookingsView.as_view(),
        name="hotel-bookings",
    ),
    path(
        "hotels/<int:hotel_id>/bookings/payment-intent",
        PaymentIntentView.as_view(),
        name="payment-intent",
    ),
    path("my-bookings", MyBookingsView.as_view(), name="my-bookings"),
]

app_name = "booking"
