from rest_framework import serializers

from hotel.models import Hotel


class HotelSerializer(serializers.ModelSerializer):
    _id = serializers.IntegerField(source="id", read_only=True)
    adultCount = serializers.IntegerField(source="adult_count")
    childCount = serializers.IntegerField(source="child_count")
    facilities = serializers.SlugRelatedField(
        slug_field="name", many=True, read_only=True
    )
    pricePerNight = serializers.DecimalField(
        source="price_per_night",
        max_digits=10,
        decimal_places=2,
        coerce_to_string=False,
    )
    starRating = serializers.IntegerField(source="star_rating")
    imageUrls = serializers.ListField(
        source="image_urls", child=serializers.CharField(), read_only=True
    )
    lastUpdated = serializers.DateTimeField(source="last_updated", read_only=True)

    class Meta:
        model = Hotel
        fields = (
            "_id",
            "name",
            "city",
            "country",
            "description",
            "type",
            "adultCount",
            "childCount",
            "facilities",
            "pricePerNight",
            "starRating",
            "imageUrls",
            "lastUpdated",
        )


class PaginationSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    page = serializers.IntegerField()
    pages = serializers.IntegerField()


class AvailabilityQuerySerializer(serializers.Serializer):
    checkIn = serializers.DateField()
    checkOut = serializers.DateField()

    def validate(self, attrs):
        if attrs["checkOut"] <= attrs["checkIn"]:
            raise serializers.ValidationError(
                "Check-out date must be after check-in date."
            )
        return attrs


class AvailabilitySerializer(serializers.Serializer):
    isAvailable = serializers.BooleanField()
