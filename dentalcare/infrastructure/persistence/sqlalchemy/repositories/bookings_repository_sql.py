from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .....db.models import Booking
from .....application.ports.bookings_repo import BookingsRepository, BookingDto
from .....exceptions import DuplicateRecordError


class SqlBookingsRepository(BookingsRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, b: Booking) -> BookingDto:
        return BookingDto(
            id=b.id,
            email=b.email,
            appointment_date=b.appointment_date,
            treatment=b.treatment,
            slot=b.slot,
            patient=b.patient,
            phone=b.phone,
            price=b.price,
            paid=bool(b.paid),
            transaction_id=b.transaction_id,
        )

    def find_conflict(self, email: str, appointment_date: str, treatment: str) -> bool:
        existing = self.session.exec(
            select(Booking)
            .where(Booking.email == email)
            .where(Booking.appointment_date == appointment_date)
            .where(Booking.treatment == treatment)
        ).first()
        return existing is not None

    def create(self, email: str, appointment_date: str, treatment: str, slot: str,
               patient: Optional[str] = None, phone: Optional[str] = None,
               price: Optional[float] = None) -> BookingDto:
        booking = Booking(
            email=email,
            appointment_date=appointment_date,
            treatment=treatment,
            slot=slot,
            patient=patient,
            phone=phone,
            price=price,
        )
        self.session.add(booking)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise DuplicateRecordError(str(e)) from e
        self.session.refresh(booking)
        return self._to_dto(booking)

    def list_for_date(self, appointment_date: str) -> List[BookingDto]:
        rows = self.session.exec(select(Booking).where(Booking.appointment_date == appointment_date)).all()
        return [self._to_dto(r) for r in rows]

    def list_for_email(self, email: str) -> List[BookingDto]:
        rows = self.session.exec(
            select(Booking)
            .where(Booking.email == email)
            .order_by(Booking.created_at)
        ).all()
        return [self._to_dto(r) for r in rows]

    def get_by_id(self, booking_id: str) -> Optional[BookingDto]:
        b = self.session.exec(select(Booking).where(Booking.id == booking_id)).first()
        return self._to_dto(b) if b else None
