from rest_framework import serializers

from booking.models import Booking
from hotel.serializers import HotelSerializer


class BookingReadSerializer(serializers.ModelSerializer):
    _id = serializers.IntegerField(source="id", read_only=True)
    userId = serializers.SerializerMethodField()
    firstName = serializers.CharField(source="first_name")
    lastName = serializers.CharField(source="last_name")
    adultCount = serializers.IntegerField(source="adult_count")
    childCount = serializers.IntegerField(source="child_count")
    checkIn = serializers.DateField(source="check_in")
    checkOut = serializers.DateField(source="check_out")
    totalCost = serializers.DecimalField(
        source="total_cost",
        max_digits=10,
        decimal_places=2,
        coerce_to_string=False,
    )

    class Meta:
        model = Booking
        fields = (
            "_id",
            "userId",
            "firstName",
            "lastName",
            "email",
            "adultCount",
            "childCount",
            "checkIn",
            "checkOut",
            "totalCost",
        )

    def get_userId(self, obj) -> str:
        return str(obj.user_id)


class BookingCreateSerializer(serializers.Serializer):
    """Booking details submitted after payment; the user always comes from the request."""

    paymentIntentId = serializers.CharField()
    firstName = serializers.CharField(source="first_name", max_length=150)
    lastName = serializers.CharField(source="last_name", max_length=150)
    email = serializers.EmailField()
    adultCount = serializers.IntegerField(source="adult_count", min_value=1)
    childCount = serializers.IntegerField(
        source="child_count", min_value=0, default=0
    )
    checkIn = serializers.DateField(source="check_in")
    checkOut = serializers.DateField(source="check_out")
    totalCost = serializers.DecimalField(
        source="total_cost", max_digits=10, decimal_places=2, min_value=0
    )

    def validate(self, attrs):
        if attrs["check_out"] <= attrs["check_in"]:
            raise serializers.ValidationError(
                "Check-out date must be after check-in date."
            )
        return attrs


class PaymentIntentRequestSerializer(serializers.Serializer):
    numberOfNights = serializers.IntegerField(min_value=1)


class PaymentIntentResponseSerializer(serializers.Serializer):
    paymentIntentId = serializers.CharField(source="payment_intent_id")
    clientSecret = serializers.CharField(source="client_secret")
    totalCost = serializers.DecimalField(
        source="total_cost",
        max_digits=12,
        decimal_places=2,
        coerce_to_string=False,
    )


class MyBookingsHotelSerializer(HotelSerializer):
    bookings = BookingReadSerializer(
        source="user_bookings", many=True, read_only=True
    )

    class Meta(HotelSerializer.Meta):
        fields = HotelSerializer.Meta.fields + ("bookings",)
