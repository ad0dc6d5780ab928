# dentalcare/db/models/appointments/option.py
from typing import List
from sqlalchemy import Column, DateTime, JSON
from sqlmodel import SQLModel, Field
from datetime import datetime

from ....utils import generate_id, utc_now


class AppointmentOption(SQLModel, table=True):
    __tablename__ = "appointment_options"
    id: str = Field(default_factory=generate_id, primary_key=True)
    name: str = Field(max_length=100, unique=True, index=True)
    price: float = Field(default=0.0)
    # Ordered slot labels, e.g. "08.00 AM - 08.30 AM"
    slots: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
