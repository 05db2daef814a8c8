from datetime import date, timedelta
from decimal import Decimal
from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.db import DatabaseError
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient, APITestCase

from booking.models import Booking
from hotel.models import Facility, Hotel


def hotels_url():
    return reverse("hotel:hotels-list")


def search_url():
    return reverse("hotel:hotels-search")


def hotel_detail_url(hotel_id) -> str:
    return reverse("hotel:hotels-detail", args=[hotel_id])


def availability_url(hotel_id) -> str:
    return reverse("hotel:hotels-availability", args=[hotel_id])


def create_user(**params):
    defaults = {
        "username": "user",
        "email": "user@test.com",
        "password": "test12345",
    }
    defaults.update(params)
    return get_user_model().objects.create_user(**defaults)


def create_hotel(**params):
    facilities = params.pop("facilities", [])
    defaults = {
        "name": "Test Hotel",
        "city": "London",
        "country": "United Kingdom",
        "description": "A hotel",
        "type": "Budget",
        "adult_count": 2,
        "child_count": 1,
        "price_per_night": Decimal("120.00"),
        "star_rating": 4,
        "image_urls": ["https://images.test/1.jpg"],
    }
    defaults.update(params)
    hotel = Hotel.objects.create(**defaults)
    hotel.facilities.set(
        [Facility.objects.get_or_create(name=name)[0] for name in facilities]
    )
    return hotel


def create_booking(hotel, user, check_in, check_out):
    return Booking.objects.create(
        hotel=hotel,
        user=user,
        first_name="John",
        last_name="Doe",
        email="john@test.com",
        adult_count=2,
        child_count=0,
        check_in=check_in,
        check_out=check_out,
        total_cost=Decimal("480.00"),
    )


class PublicHotelApiTests(APITestCase):
    def setUp(self):
        self.client = APIClient()

    def test_urls_have_no_trailing_slash(self):
        self.assertEqual(hotels_url(), "/api/hotels")
        self.assertEqual(search_url(), "/api/hotels/search")
        self.assertEqual(availability_url(7), "/api/hotels/7/availability")

    def test_list_hotels_newest_first(self):
        older = create_hotel(name="Older")
        newer = create_hotel(name="Newer")
        Hotel.objects.filter(pk=older.pk).update(
            last_updated=timezone.now() - timedelta(days=2)
        )
        Hotel.objects.filter(pk=newer.pk).update(last_updated=timezone.now())

        res = self.client.get(hotels_url())

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([h["name"] for h in res.data], ["Newer", "Older"])

    def test_retrieve_hotel(self):
        hotel = create_hotel(name="Ritz", facilities=["wifi", "spa"])

        res = self.client.get(hotel_detail_url(hotel.id))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["_id"], hotel.id)
        self.assertEqual(res.data["name"], "Ritz")
        self.assertEqual(res.data["pricePerNight"], Decimal("120.00"))
        self.assertEqual(res.data["starRating"], 4)
        self.assertEqual(res.data["adultCount"], 2)
        self.assertEqual(sorted(res.data["facilities"]), ["spa", "wifi"])
        self.assertEqual(res.data["imageUrls"], ["https://images.test/1.jpg"])

    def test_retrieve_missing_hotel_returns_404(self):
        res = self.client.get(hotel_detail_url(999))

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_retrieve_invalid_id_returns_400(self):
        res = self.client.get(hotel_detail_url("not-an-id"))

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("detail", res.data)

    def test_retrieve_non_ascii_digit_id_returns_400(self):
        res = self.client.get(hotel_detail_url("²"))

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_search_returns_page_and_pagination(self):
        for i in range(7):
            create_hotel(name=f"Hotel {i}", city="Paris", country="France")
        create_hotel(name="Elsewhere", city="Rome", country="Italy")

        res = self.client.get(search_url(), {"destination": "paris", "page": 2})

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(len(res.data["data"]), 2)
        self.assertEqual(
            res.data["pagination"], {"total": 7, "page": 2, "pages": 2}
        )

    def test_search_with_repeated_params(self):
        create_hotel(name="Both", facilities=["wifi", "pool"], type="Luxury")
        create_hotel(name="Wifi", facilities=["wifi"], type="Luxury")
        create_hotel(name="Cabin", facilities=["wifi", "pool"], type="Cabin")

        res = self.client.get(
            search_url(),
            {"facilities": ["wifi", "pool"], "types": ["Luxury", "Budget"]},
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([h["name"] for h in res.data["data"]], ["Both"])

    def test_search_invalid_number_returns_400(self):
        res = self.client.get(search_url(), {"maxPrice": "cheap"})

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("maxPrice", res.data)

    @patch("hotel.views.search_hotels", side_effect=DatabaseError)
    def test_search_database_error_returns_500(self, mock_search):
        res = self.client.get(search_url(), {"destination": "paris"})

        self.assertEqual(res.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(res.data, {"detail": "Search failed"})
        mock_search.assert_called_once()

    def test_search_huge_page_is_empty(self):
        create_hotel(name="Only")

        res = self.client.get(search_url(), {"page": str(10**20)})

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["data"], [])
        self.assertEqual(res.data["pagination"]["total"], 1)
        self.assertEqual(res.data["pagination"]["pages"], 1)

    def test_search_no_results(self):
        res = self.client.get(search_url(), {"destination": "nowhere"})

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["data"], [])
        self.assertEqual(
            res.data["pagination"], {"total": 0, "page": 1, "pages": 0}
        )


class HotelAvailabilityApiTests(APITestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = create_user()
        self.hotel = create_hotel()
        create_booking(self.hotel, self.user, date(2024, 6, 1), date(2024, 6, 5))
        self.url = availability_url(self.hotel.id)

    def test_adjacent_stay_is_available(self):
        res = self.client.get(
            self.url, {"checkIn": "2024-06-05", "checkOut": "2024-06-08"}
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data, {"isAvailable": True})

    def test_overlapping_stay_is_unavailable(self):
        res = self.client.get(
            self.url, {"checkIn": "2024-06-04", "checkOut": "2024-06-06"}
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data, {"isAvailable": False})

    def test_missing_dates_returns_400(self):
        res = self.client.get(self.url, {"checkIn": "2024-06-04"})
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

        res = self.client.get(self.url, {"checkOut": "2024-06-04"})
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_unparseable_dates_return_400(self):
        res = self.client.get(
            self.url, {"checkIn": "tomorrow", "checkOut": "2024-06-08"}
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("checkIn", res.data)

    def test_reversed_dates_return_400(self):
        res = self.client.get(
            self.url, {"checkIn": "2024-06-08", "checkOut": "2024-06-05"}
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_unknown_hotel_returns_404(self):
        res = self.client.get(
            availability_url(999),
            {"checkIn": "2024-06-05", "checkOut": "2024-06-08"},
        )

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_non_ascii_digit_id_returns_404(self):
        res = self.client.get(
            availability_url("²"),
            {"checkIn": "2024-06-05", "checkOut": "2024-06-08"},
        )

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_hotel_without_bookings_is_available(self):
        empty = create_hotel(name="Empty")

        res = self.client.get(
            availability_url(empty.id),
            {"checkIn": "2024-06-01", "checkOut": "2024-06-30"},
        )

        self.assertEqual(res.data, {"isAvailable": True})
