import logging

from django.db import DatabaseError
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiResponse,
    extend_schema,
    inline_serializer,
)
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from booking.services.availability import is_available
from hotel.exceptions import HotelNotFound
from hotel.search import get_hotel, list_hotels, search_hotels
from hotel.serializers import (
    AvailabilityQuerySerializer,
    AvailabilitySerializer,
    HotelSerializer,
    PaginationSerializer,
)

logger = logging.getLogger(__name__)


class HotelViewSet(ViewSet):
    authentication_classes = ()
    permission_classes = ()

    @extend_schema(
        summary="List hotels",
        description="All hotels, most recently updated first.",
        responses={200: HotelSerializer(many=True)},
    )
    def list(self, request):
        return Response(HotelSerializer(list_hotels(), many=True).data)

    @extend_schema(
        summary="Retrieve a hotel",
        responses={
            200: HotelSerializer,
            400: OpenApiResponse(description="Invalid hotel id"),
            404: OpenApiResponse(description="Hotel not found"),
        },
    )
    def retrieve(self, request, pk=None):
        if not pk or not (str(pk).isascii() and str(pk).isdigit()):
            return Response(
                {"detail": "A valid hotel id is required"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            hotel = get_hotel(pk)
        except HotelNotFound as e:
            return Response({"detail": str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(HotelSerializer(hotel).data)

    @extend_schema(
        summary="Search hotels",
        description=(
            "Filter, sort and paginate hotels. Pages hold 5 hotels.\n\n"
            "- destination matches city or country, comma separated.\n"
            "- adultCount / childCount are minimum capacities.\n"
            "- facilities must all be present; types and stars match any."
        ),
        parameters=[
            OpenApiParameter("destination", OpenApiTypes.STR, required=False),
            OpenApiParameter("adultCount", OpenApiTypes.INT, required=False),
            OpenApiParameter("childCount", OpenApiTypes.INT, required=False),
            OpenApiParameter(
                "facilities", OpenApiTypes.STR, many=True, required=False
            ),
            OpenApiParameter("types", OpenApiTypes.STR, many=True, required=False),
            OpenApiParameter("stars", OpenApiTypes.INT, many=True, required=False),
            OpenApiParameter("maxPrice", OpenApiTypes.INT, required=False),
            OpenApiParameter(
                "sortOption",
                OpenApiTypes.STR,
                enum=["starRating", "pricePerNightAsc", "pricePerNightDesc"],
                required=False,
            ),
            OpenApiParameter("page", OpenApiTypes.INT, required=False),
        ],
        responses={
            200: inline_serializer(
                name="HotelSearchResponse",
                fields={
                    "data": HotelSerializer(many=True),
                    "pagination": PaginationSerializer(),
                },
            ),
        },
    )
    @action(methods=["GET"], detail=False, url_path="search")
    def search(self, request):
        try:
            result = search_hotels(request.query_params)
        except DatabaseError:
            logger.exception("Hotel search failed")
            return Response(
                {"detail": "Search failed"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(
            {
                "data": HotelSerializer(result.hotels, many=True).data,
                "pagination": PaginationSerializer(result).data,
            }
        )

    @extend_schema(
        summary="Check availability",
        parameters=[
            OpenApiParameter(
                name="checkIn",
                type=OpenApiTypes.DATE,
                location=OpenApiParameter.QUERY,
                description="Check-in date (YYYY-MM-DD)",
                required=True,
            ),
            OpenApiParameter(
                name="checkOut",
                type=OpenApiTypes.DATE,
                location=OpenApiParameter.QUERY,
                description="Check-out date (YYYY-MM-DD)",
                required=True,
            ),
        ],
        responses={
            200: AvailabilitySerializer,
            400: OpenApiResponse(description="Missing or invalid dates"),
            404: OpenApiResponse(description="Hotel not found"),
        },
    )
    @action(methods=["GET"], detail=True, url_path="availability")
    def availability(self, request, pk=None):
        query = AvailabilityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        try:
            if not (str(pk).isascii() and str(pk).isdigit()):
                raise HotelNotFound(pk)
            hotel = get_hotel(pk)
        except HotelNotFound as e:
            return Response({"detail": str(e)}, status=status.HTTP_404_NOT_FOUND)

        available = is_available(
            hotel.bookings.all(),
            query.validated_data["checkIn"],
            query.validated_data["checkOut"],
        )
        return Response(AvailabilitySerializer({"isAvailable": available}).data)
