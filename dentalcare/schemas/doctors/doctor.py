# dentalcare/schemas/doctors/doctor.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class DoctorBase(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    specialty: str = Field(min_length=1, max_length=100)
    email: Optional[str] = None
    image: Optional[str] = None


class DoctorCreate(DoctorBase):
    pass


class DoctorResponse(DoctorBase):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
