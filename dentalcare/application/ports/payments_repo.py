from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass
class PaymentDto:
    id: str
    booking_id: str
    transaction_id: str
    amount: float
    email: Optional[str] = None


class PaymentsRepository(Protocol):
    def get_by_transaction(self, transaction_id: str) -> Optional[PaymentDto]:
        ...

    def record_and_mark_paid(self, booking_id: str, transaction_id: str, amount: float, email: Optional[str]) -> PaymentDto:
        """Insert the payment and flag the booking paid in a single transaction.

        Raises DuplicateRecordError if the transaction id was recorded concurrently.
        """
        ...
