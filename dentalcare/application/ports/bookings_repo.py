from dataclasses import dataclass
from typing import List, Optional, Protocol


@dataclass
class BookingDto:
    id: str
    email: str
    appointment_date: str
    treatment: str
    slot: str
    patient: Optional[str] = None
    phone: Optional[str] = None
    price: Optional[float] = None
    paid: bool = False
    transaction_id: Optional[str] = None


class BookingsRepository(Protocol):
    def find_conflict(self, email: str, appointment_date: str, treatment: str) -> bool:
        ...

    def create(self, email: str, appointment_date: str, treatment: str, slot: str,
               patient: Optional[str] = None, phone: Optional[str] = None,
               price: Optional[float] = None) -> BookingDto:
        """Insert a booking. Raises DuplicateRecordError if the store already holds the triple."""
        ...

    def list_for_date(self, appointment_date: str) -> List[BookingDto]:
        ...

    def list_for_email(self, email: str) -> List[BookingDto]:
        ...

    def get_by_id(self, booking_id: str) -> Optional[BookingDto]:
        ...
