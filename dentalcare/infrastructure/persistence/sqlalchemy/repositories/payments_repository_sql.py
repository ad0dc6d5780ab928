from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .....db.models import Booking, Payment
from .....application.ports.payments_repo import PaymentsRepository, PaymentDto
from .....exceptions import DuplicateRecordError


class SqlPaymentsRepository(PaymentsRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, p: Payment) -> PaymentDto:
        return PaymentDto(
            id=p.id,
            booking_id=p.booking_id,
            transaction_id=p.transaction_id,
            amount=p.amount,
            email=p.email,
        )

    def get_by_transaction(self, transaction_id: str) -> Optional[PaymentDto]:
        p = self.session.exec(select(Payment).where(Payment.transaction_id == transaction_id)).first()
        return self._to_dto(p) if p else None

    def record_and_mark_paid(self, booking_id: str, transaction_id: str, amount: float, email: Optional[str]) -> PaymentDto:
        payment = Payment(booking_id=booking_id, transaction_id=transaction_id, amount=amount, email=email)
        self.session.add(payment)

        booking = self.session.exec(select(Booking).where(Booking.id == booking_id)).first()
        if booking:
            booking.paid = True
            booking.transaction_id = transaction_id
            self.session.add(booking)

        # Payment insert and booking update land in one commit or not at all
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise DuplicateRecordError(str(e)) from e
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(payment)
        return self._to_dto(payment)
