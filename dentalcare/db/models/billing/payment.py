# dentalcare/db/models/billing/payment.py
from typing import Optional
from sqlmodel import SQLModel, Field
from datetime import datetime
from sqlalchemy import DateTime

from ....utils import generate_id, utc_now


class Payment(SQLModel, table=True):
    __tablename__ = "payments"
    id: str = Field(default_factory=generate_id, primary_key=True)
    booking_id: str = Field(foreign_key="bookings.id", index=True)
    transaction_id: str = Field(max_length=255, unique=True, index=True)
    amount: float
    email: Optional[str] = Field(max_length=100, default=None)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
