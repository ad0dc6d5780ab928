import logging
from dataclasses import dataclass
from typing import Optional
from fastapi import HTTPException

from ..ports.payment_gateway import PaymentGateway
from ..ports.payments_repo import PaymentsRepository, PaymentDto
from ..ports.bookings_repo import BookingsRepository
from ...exceptions import DuplicateRecordError, PaymentProviderError

logger = logging.getLogger(__name__)


def to_minor_units(price: float) -> int:
    """Convert a price in currency units to the smallest unit (cents)."""
    return int(round(price * 100))


@dataclass
class PaymentService:
    payments_repo: PaymentsRepository
    bookings_repo: BookingsRepository
    gateway: Optional[PaymentGateway] = None
    currency: str = "usd"

    def create_intent(self, price: float) -> str:
        if price is None or price <= 0:
            raise HTTPException(status_code=422, detail="Price must be greater than zero")
        if self.gateway is None:
            raise HTTPException(status_code=503, detail="Payment provider not configured")
        try:
            return self.gateway.create_intent(to_minor_units(price), self.currency)
        except PaymentProviderError as e:
            logger.error(f"Payment intent creation failed: {str(e)}")
            raise HTTPException(status_code=502, detail="Payment provider error")

    def confirm(self, booking_id: str, transaction_id: str, amount: float, email: Optional[str] = None) -> PaymentDto:
        """Record a payment and mark its booking paid.

        Replaying an already recorded transaction id returns the stored payment.
        """
        existing = self.payments_repo.get_by_transaction(transaction_id)
        if existing:
            logger.info(f"Payment {transaction_id} already recorded for booking {existing.booking_id}")
            return existing

        if not self.bookings_repo.get_by_id(booking_id):
            raise HTTPException(status_code=404, detail="Booking not found")

        try:
            payment = self.payments_repo.record_and_mark_paid(booking_id, transaction_id, amount, email)
        except DuplicateRecordError:
            existing = self.payments_repo.get_by_transaction(transaction_id)
            if not existing:
                raise
            return existing

        logger.info(f"Booking {booking_id} marked paid with transaction {transaction_id}")
        return payment
