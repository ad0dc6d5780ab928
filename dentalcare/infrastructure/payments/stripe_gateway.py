import logging

import stripe

from ...application.ports.payment_gateway import PaymentGateway
from ...exceptions import PaymentProviderError

logger = logging.getLogger(__name__)


class StripePaymentGateway(PaymentGateway):
    def __init__(self, api_key: str) -> None:
        if not api_key:
            raise ValueError("STRIPE_SECRET_KEY not configured")
        self.api_key = api_key

    def create_intent(self, amount: int, currency: str) -> str:
        try:
            intent = stripe.PaymentIntent.create(
                amount=amount,
                currency=currency,
                payment_method_types=["card"],
                api_key=self.api_key,
            )
        except stripe.StripeError as e:
            logger.error(f"Stripe PaymentIntent.create failed: {e}")
            raise PaymentProviderError(str(e)) from e
        logger.info(f"Created payment intent {intent.id} for {amount} {currency}")
        return intent.client_secret
