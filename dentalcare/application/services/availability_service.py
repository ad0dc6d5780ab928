import logging
from collections import defaultdict
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Set

from ..ports.options_repo import AppointmentOptionsRepository, AppointmentOptionDto
from ..ports.bookings_repo import BookingsRepository, BookingDto

logger = logging.getLogger(__name__)


def remaining_slots(slots: List[str], booked: Iterable[str]) -> List[str]:
    """Template slots minus booked ones, keeping template order."""
    taken = set(booked)
    return [slot for slot in slots if slot not in taken]


def compute_availability(options: List[AppointmentOptionDto], bookings: Iterable[BookingDto],
                         appointment_date: str) -> List[AppointmentOptionDto]:
    """Subtract the slots booked on `appointment_date` from every treatment template.

    Bookings for other dates are ignored. Templates are not mutated; each
    result is a copy carrying only the free slots.
    """
    booked_by_treatment: Dict[str, Set[str]] = defaultdict(set)
    for booking in bookings:
        if booking.appointment_date == appointment_date:
            booked_by_treatment[booking.treatment].add(booking.slot)

    return [
        replace(option, slots=remaining_slots(option.slots, booked_by_treatment.get(option.name, ())))
        for option in options
    ]


@dataclass
class AvailabilityService:
    options_repo: AppointmentOptionsRepository
    bookings_repo: BookingsRepository

    def available_options(self, appointment_date: str) -> List[AppointmentOptionDto]:
        options = self.options_repo.list_all()
        already_booked = self.bookings_repo.list_for_date(appointment_date)
        return self._logged(appointment_date, compute_availability(options, already_booked, appointment_date))

    def available_options_from_store(self, appointment_date: str) -> List[AppointmentOptionDto]:
        """Same result as available_options, with the option/booking join done by the store."""
        rows = self.options_repo.list_with_booked_slots(appointment_date)
        result = [replace(option, slots=remaining_slots(option.slots, booked)) for option, booked in rows]
        return self._logged(appointment_date, result)

    @staticmethod
    def _logged(appointment_date: str, result: List[AppointmentOptionDto]) -> List[AppointmentOptionDto]:
        for option in result:
            logger.debug(f"{appointment_date} {option.name} {len(option.slots)}")
        return result

    def specialties(self) -> List[AppointmentOptionDto]:
        return self.options_repo.list_all()
