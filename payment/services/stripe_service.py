from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

import stripe
from django.conf import settings


@dataclass(frozen=True)
class PaymentIntentRecord:
    id: str
    status: str
    client_secret: Optional[str]
    metadata: dict = field(default_factory=dict)


class PaymentGateway(ABC):
    """Operations the booking flow needs from a payment processor."""

    @abstractmethod
    def create_intent(
        self, amount: int, currency: str, metadata: dict
    ) -> PaymentIntentRecord:
        raise NotImplementedError

    @abstractmethod
    def retrieve_intent(self, payment_intent_id: str) -> Optional[PaymentIntentRecord]:
        raise NotImplementedError


def to_cents(amount: Decimal) -> int:
    return int(Decimal(amount).quantize(Decimal("0.01")) * 100)


def _to_record(intent) -> PaymentIntentRecord:
    metadata = getattr(intent, "metadata", None)
    return PaymentIntentRecord(
        id=intent.id,
        status=intent.status,
        client_secret=getattr(intent, "client_secret", None),
        metadata=metadata.to_dict() if metadata is not None else {},
    )


class StripePaymentGateway(PaymentGateway):
    def __init__(self, api_key: str):
        self.api_key = api_key

    def create_intent(self, amount, currency, metadata):
        intent = stripe.PaymentIntent.create(
            amount=amount,
            currency=currency,
            metadata=metadata,
            api_key=self.api_key,
        )
        return _to_record(intent)

    def retrieve_intent(self, payment_intent_id):
        try:
            intent = stripe.PaymentIntent.retrieve(
                payment_intent_id, api_key=self.api_key
            )
        except stripe.InvalidRequestError as e:
            if e.code == "resource_missing":
                return None
            raise
        return _to_record(intent)


def get_payment_gateway() -> PaymentGateway:
    return StripePaymentGateway(api_key=settings.STRIPE_SECRET_KEY)
