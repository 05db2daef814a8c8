import logging

from django.db import transaction
from django.db.models import Prefetch

from booking.exceptions import DatesUnavailable
from booking.models import Booking
from booking.services.availability import is_available
from hotel.exceptions import HotelNotFound
from hotel.models import Hotel
from payment.exceptions import (
    PaymentIntentMismatch,
    PaymentIntentNotFound,
    PaymentNotCompleted,
)
from payment.services.stripe_service import PaymentGateway

logger = logging.getLogger(__name__)


def verify_payment_intent(
    gateway: PaymentGateway, payment_intent_id: str, hotel_id, user
):
    """
    Fetch the intent and check it was paid by ``user`` for ``hotel_id``.
    Both metadata fields must match; neither is ever corrected.
    """
    intent = gateway.retrieve_intent(payment_intent_id)
    if intent is None:
        raise PaymentIntentNotFound(payment_intent_id)

    if (
        intent.metadata.get("hotelId") != str(hotel_id)
        or intent.metadata.get("userId") != str(user.pk)
    ):
        logger.warning(
            f"Payment intent {payment_intent_id} does not belong to "
            f"hotel {hotel_id} and user {user.pk}"
        )
        raise PaymentIntentMismatch(payment_intent_id)

    if intent.status != "succeeded":
        raise PaymentNotCompleted(intent.status)

    return intent


def create_booking(
    hotel_id,
    user,
    payment_intent_id: str,
    details: dict,
    gateway: PaymentGateway,
    hotels=None,
) -> Booking:
    if hotels is None:
        hotels = Hotel.objects.all()

    verify_payment_intent(gateway, payment_intent_id, hotel_id, user)

    check_in = details["check_in"]
    check_out = details["check_out"]

    try:
        with transaction.atomic():
            hotel = hotels.select_for_update().filter(pk=hotel_id).first()
            if hotel is None:
                raise HotelNotFound(hotel_id)

            if not is_available(hotel.bookings.all(), check_in, check_out):
                raise DatesUnavailable(check_in, check_out)

            booking = Booking.objects.create(hotel=hotel, user=user, **details)
    except (HotelNotFound, DatesUnavailable):
        logger.error(
            f"Payment intent {payment_intent_id} succeeded but booking "
            f"for hotel {hotel_id} was not recorded"
        )
        raise

    logger.info(
        f"Created booking {booking.id} for hotel {hotel_id}, user {user.pk}"
    )
    return booking


def get_hotel_bookings(hotel_id, hotels=None):
    if hotels is None:
        hotels = Hotel.objects.all()
    try:
        hotel = hotels.get(pk=hotel_id)
    except Hotel.DoesNotExist:
        raise HotelNotFound(hotel_id)
    return hotel.bookings.all()


def my_bookings(user, hotels=None):
    """Hotels holding at least one booking of ``user``, with only those bookings."""
    if hotels is None:
        hotels = Hotel.objects.all()
    return (
        hotels.filter(bookings__user=user)
        .distinct()
        .order_by("id")
        .prefetch_related(
            "facilities",
            Prefetch(
                "bookings",
                queryset=Booking.objects.filter(user=user),
                to_attr="user_bookings",
            ),
        )
    )
