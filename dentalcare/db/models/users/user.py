# dentalcare/db/models/users/user.py
from typing import Optional
from sqlmodel import SQLModel, Field
from datetime import datetime
from sqlalchemy import DateTime

from ....utils import generate_id, utc_now


class User(SQLModel, table=True):
    __tablename__ = "users"
    id: str = Field(default_factory=generate_id, primary_key=True)
    email: str = Field(max_length=100, unique=True, index=True)
    name: Optional[str] = Field(max_length=100, default=None)
    role: Optional[str] = Field(max_length=20, default=None)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
