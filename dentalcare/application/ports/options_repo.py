from dataclasses import dataclass, field
from typing import List, Protocol, Tuple


@dataclass
class AppointmentOptionDto:
    id: str
    name: str
    price: float
    slots: List[str] = field(default_factory=list)


class AppointmentOptionsRepository(Protocol):
    def list_all(self) -> List[AppointmentOptionDto]:
        ...

    def list_with_booked_slots(self, appointment_date: str) -> List[Tuple[AppointmentOptionDto, List[str]]]:
        """Each option paired with the slots already booked for it on the date, resolved by the store."""
        ...

    def count(self) -> int:
        ...

    def create(self, name: str, price: float, slots: List[str]) -> AppointmentOptionDto:
        ...
