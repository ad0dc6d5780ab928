from typing import Protocol


class PaymentGateway(Protocol):
    def create_intent(self, amount: int, currency: str) -> str:
        """Create a card payment intent for `amount` in the smallest currency unit; returns its client secret."""
        ...
