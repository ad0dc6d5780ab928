import logging
from dataclasses import dataclass
from typing import List, Optional
from fastapi import HTTPException

from ..ports.bookings_repo import BookingsRepository, BookingDto
from ...exceptions import DuplicateRecordError

logger = logging.getLogger(__name__)


@dataclass
class BookingResult:
    acknowledged: bool
    inserted_id: Optional[str] = None
    message: Optional[str] = None


@dataclass
class BookingService:
    repo: BookingsRepository

    def book(self, email: str, appointment_date: str, treatment: str, slot: str,
             patient: Optional[str] = None, phone: Optional[str] = None,
             price: Optional[float] = None) -> BookingResult:
        conflict = BookingResult(
            acknowledged=False,
            message=f"You already have a booking on {appointment_date}",
        )
        if self.repo.find_conflict(email, appointment_date, treatment):
            return conflict

        try:
            booking = self.repo.create(email, appointment_date, treatment, slot, patient, phone, price)
        except DuplicateRecordError:
            # A concurrent submission won between the check and the insert
            logger.info(f"Duplicate booking rejected by store for {treatment} on {appointment_date}")
            return conflict

        return BookingResult(acknowledged=True, inserted_id=booking.id)

    def list_for_identity(self, email: Optional[str], identity: str) -> List[BookingDto]:
        if email != identity:
            raise HTTPException(status_code=403, detail="Forbidden Access")
        return self.repo.list_for_email(email)

    def get(self, booking_id: str) -> BookingDto:
        booking = self.repo.get_by_id(booking_id)
        if not booking:
            raise HTTPException(status_code=404, detail="Booking not found")
        return booking
