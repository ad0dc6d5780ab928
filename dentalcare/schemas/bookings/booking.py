# dentalcare/schemas/bookings/booking.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class BookingBase(BaseModel):
    email: str = Field(min_length=3, max_length=100)
    appointmentDate: str = Field(min_length=1, max_length=40)
    treatment: str = Field(min_length=1, max_length=100)
    slot: str = Field(min_length=1, max_length=50)
    patient: Optional[str] = None
    phone: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)


class BookingCreate(BookingBase):
    pass


class BookingResponse(BookingBase):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    paid: bool = False
    transactionId: Optional[str] = None
