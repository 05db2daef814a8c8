from typing import Optional


class PaymentIntentNotFound(Exception):
    """Thrown when the payment processor has no intent with the given id"""

    def __init__(
            self,
            payment_intent_id: Optional[str] = None,
            message: Optional[str] = None
    ) -> None:
        if message is None:
            message = "Payment intent not found"
        super().__init__(message)
        self.payment_intent_id = payment_intent_id


class PaymentIntentMismatch(Exception):
    """Thrown when the intent was created for another hotel or user"""

    def __init__(
            self,
            payment_intent_id: Optional[str] = None,
            message: Optional[str] = None
    ) -> None:
        if message is None:
            message = "Payment intent mismatch"
        super().__init__(message)
        self.payment_intent_id = payment_intent_id


class PaymentNotCompleted(Exception):
    """Thrown when the intent has not reached the "succeeded" status"""

    def __init__(
            self,
            status: Optional[str] = None,
            message: Optional[str] = None
    ) -> None:
        if message is None:
            message = f"Payment intent not succeeded. Status: {status}"
        super().__init__(message)
        self.status = status


class PaymentIntentCreationFailed(Exception):
    """Thrown when the processor returns an intent without a client secret"""

    def __init__(
            self,
            hotel_id: Optional[int] = None,
            message: Optional[str] = None
    ) -> None:
        if message is None:
            message = "Error creating payment intent"
        super().__init__(message)
        self.hotel_id = hotel_id
