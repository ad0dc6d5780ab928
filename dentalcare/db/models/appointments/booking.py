# dentalcare/db/models/appointments/booking.py
from typing import Optional
from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import SQLModel, Field
from datetime import datetime

from ....utils import generate_id, utc_now


class Booking(SQLModel, table=True):
    __tablename__ = "bookings"
    __table_args__ = (
        UniqueConstraint("email", "appointment_date", "treatment", name="uq_bookings_email_date_treatment"),
    )
    id: str = Field(default_factory=generate_id, primary_key=True)
    email: str = Field(max_length=100, index=True)
    appointment_date: str = Field(max_length=40, index=True)
    treatment: str = Field(max_length=100)
    slot: str = Field(max_length=50)
    patient: Optional[str] = Field(max_length=100, default=None)
    phone: Optional[str] = Field(max_length=20, default=None)
    price: Optional[float] = Field(default=None)
    paid: bool = Field(default=False)
    transaction_id: Optional[str] = Field(max_length=255, default=None)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
