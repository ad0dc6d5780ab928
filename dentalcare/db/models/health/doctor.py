# dentalcare/db/models/health/doctor.py
from typing import Optional
from sqlmodel import SQLModel, Field
from datetime import datetime
from sqlalchemy import DateTime

from ....utils import generate_id, utc_now


class Doctor(SQLModel, table=True):
    __tablename__ = "doctors"
    id: str = Field(default_factory=generate_id, primary_key=True)
    name: str = Field(max_length=100)
    specialty: str = Field(max_length=100)
    email: Optional[str] = Field(max_length=100, default=None)
    image: Optional[str] = Field(max_length=500, default=None)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
