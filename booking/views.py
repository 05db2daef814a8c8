from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.authentication import JWTAuthentication

from booking.exceptions import DatesUnavailable
from booking.filters import BookingFilter
from booking.serializers import (
    BookingCreateSerializer,
    BookingReadSerializer,
    MyBookingsHotelSerializer,
    PaymentIntentRequestSerializer,
    PaymentIntentResponseSerializer,
)
from booking.services.booking_service import (
    create_booking,
    get_hotel_bookings,
    my_bookings,
)
from hotel.exceptions import HotelNotFound
from hotel.search import get_hotel
from payment.exceptions import (
    PaymentIntentCreationFailed,
    PaymentIntentMismatch,
    PaymentIntentNotFound,
    PaymentNotCompleted,
)
from payment.services.payment_service import create_payment_intent
from payment.services.stripe_service import get_payment_gateway


class HotelBookingsView(APIView):
    authentication_classes = (JWTAuthentication,)
    permission_classes = [IsAuthenticated]
    filterset_class = BookingFilter

    @extend_schema(
        summary="List bookings of a hotel",
        responses={
            200: BookingReadSerializer(many=True),
            404: OpenApiResponse(description="Hotel not found"),
        },
    )
    def get(self, request, hotel_id):
        try:
            bookings = get_hotel_bookings(hotel_id)
        except HotelNotFound as e:
            return Response({"detail": str(e)}, status=status.HTTP_404_NOT_FOUND)

        bookings = DjangoFilterBackend().filter_queryset(request, bookings, self)
        return Response(BookingReadSerializer(bookings, many=True).data)

    @extend_schema(
        summary="Create a booking",
        description=(
            "Records a booking once its Stripe payment intent has succeeded.\n\n"
            "The intent must have been created for this hotel and the "
            "authenticated user."
        ),
        request=BookingCreateSerializer,
        responses={
            200: OpenApiResponse(description="Booking created"),
            400: OpenApiResponse(description="Payment or booking rejected"),
        },
    )
    def post(self, request, hotel_id):
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        details = dict(serializer.validated_data)
        payment_intent_id = details.pop("paymentIntentId")

        try:
            create_booking(
                hotel_id,
                request.user,
                payment_intent_id,
                details,
                gateway=get_payment_gateway(),
            )
        except (
            PaymentIntentNotFound,
            PaymentIntentMismatch,
            PaymentNotCompleted,
            HotelNotFound,
            DatesUnavailable,
        ) as e:
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(status=status.HTTP_200_OK)


class PaymentIntentView(APIView):
    authentication_classes = (JWTAuthentication,)
    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Create a payment intent for a stay",
        request=PaymentIntentRequestSerializer,
        responses={
            200: PaymentIntentResponseSerializer,
            400: OpenApiResponse(description="Hotel not found"),
            500: OpenApiResponse(description="Error creating payment intent"),
        },
    )
    def post(self, request, hotel_id):
        serializer = PaymentIntentRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            hotel = get_hotel(hotel_id)
        except HotelNotFound as e:
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            result = create_payment_intent(
                hotel,
                serializer.validated_data["numberOfNights"],
                request.user,
                gateway=get_payment_gateway(),
            )
        except PaymentIntentCreationFailed as e:
            return Response(
                {"detail": str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(PaymentIntentResponseSerializer(result).data)


@extend_schema(
    summary="List my bookings",
    description="Hotels the authenticated user has booked, with their bookings.",
)
class MyBookingsView(generics.ListAPIView):
    serializer_class = MyBookingsHotelSerializer
    authentication_classes = (JWTAuthentication,)
    permission_classes = [IsAuthenticated]
    filter_backends = []

    def get_queryset(self):
        return my_bookings(self.request.user)
