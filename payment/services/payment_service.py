import logging
from dataclasses import dataclass
from decimal import Decimal

from django.conf import settings

from hotel.models import Hotel
from payment.exceptions import PaymentIntentCreationFailed
from payment.services.stripe_service import PaymentGateway, to_cents

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaymentIntentResult:
    payment_intent_id: str
    client_secret: str
    total_cost: Decimal


def calculate_total_cost(hotel: Hotel, number_of_nights: int) -> Decimal:
    return hotel.price_per_night * number_of_nights


def create_payment_intent(
    hotel: Hotel, number_of_nights: int, user, gateway: PaymentGateway
) -> PaymentIntentResult:
    total_cost = calculate_total_cost(hotel, number_of_nights)

    intent = gateway.create_intent(
        amount=to_cents(total_cost),
        currency=settings.STRIPE_CURRENCY,
        metadata={
            "hotelId": str(hotel.pk),
            "userId": str(user.pk),
        },
    )

    if not intent.client_secret:
        logger.error(
            f"Payment intent {intent.id} for hotel {hotel.pk} has no client secret"
        )
        raise PaymentIntentCreationFailed(hotel.pk)

    logger.info(
        f"Created payment intent {intent.id} for hotel {hotel.pk}, "
        f"user {user.pk}, total {total_cost}"
    )
    return PaymentIntentResult(
        payment_intent_id=intent.id,
        client_secret=intent.client_secret,
        total_cost=total_cost,
    )
