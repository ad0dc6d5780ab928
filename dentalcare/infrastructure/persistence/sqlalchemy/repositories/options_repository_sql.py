from typing import Dict, List, Tuple
from sqlalchemy import and_, func
from sqlmodel import Session, select

from .....db.models import AppointmentOption, Booking
from .....application.ports.options_repo import AppointmentOptionsRepository, AppointmentOptionDto


class SqlAppointmentOptionsRepository(AppointmentOptionsRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, o: AppointmentOption) -> AppointmentOptionDto:
        return AppointmentOptionDto(id=o.id, name=o.name, price=o.price, slots=list(o.slots or []))

    def list_all(self) -> List[AppointmentOptionDto]:
        rows = self.session.exec(select(AppointmentOption).order_by(AppointmentOption.name)).all()
        return [self._to_dto(r) for r in rows]

    def list_with_booked_slots(self, appointment_date: str) -> List[Tuple[AppointmentOptionDto, List[str]]]:
        rows = self.session.exec(
            select(AppointmentOption, Booking.slot)
            .outerjoin(
                Booking,
                and_(
                    Booking.treatment == AppointmentOption.name,
                    Booking.appointment_date == appointment_date,
                ),
            )
            .order_by(AppointmentOption.name)
        ).all()

        grouped: Dict[str, Tuple[AppointmentOptionDto, List[str]]] = {}
        for option, slot in rows:
            if option.id not in grouped:
                grouped[option.id] = (self._to_dto(option), [])
            if slot is not None:
                grouped[option.id][1].append(slot)
        return list(grouped.values())

    def count(self) -> int:
        return self.session.exec(select(func.count()).select_from(AppointmentOption)).one()

    def create(self, name: str, price: float, slots: List[str]) -> AppointmentOptionDto:
        option = AppointmentOption(name=name, price=price, slots=list(slots))
        self.session.add(option)
        self.session.commit()
        self.session.refresh(option)
        return self._to_dto(option)
