# dentalcare/schemas/appointments/option.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List


class AppointmentOptionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    price: float
    slots: List[str] = []


class SpecialtyResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
